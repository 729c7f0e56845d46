from collections import defaultdict
from types import SimpleNamespace

from fastapi.testclient import TestClient

import database
from main import app

client = TestClient(app)


def cgpa_payload():
    return {
        "trimesters": [
            {"name": "Spring 2024", "courses": [
                {"code": "CSE 1110", "name": "Intro", "credit": 1, "grade": "A"},
                {"code": "CSE 1111", "name": "SPL", "credit": 3, "grade": "F"},
            ]},
            {"code": "242", "courses": [
                {"code": "CSE 1111", "name": "SPL", "credit": 3, "grade": "b+", "is_retake": True, "previous_grade": "F"},
                {"code": "CSE 2213", "name": "Discrete", "credit": 3, "grade": "A-"},
            ]},
        ]
    }


def test_root():
    r = client.get('/')
    assert r.status_code == 200
    assert 'CGPA' in r.json()['message']


def test_grade_table():
    r = client.get('/api/grades')
    assert r.status_code == 200
    data = r.json()
    assert data['grades'][0]['letter'] == 'A'
    assert len(data['options']) == 11
    assert 3 in data['credit_options']


def test_gpa_basic():
    payload = {
        "courses": [
            {"code": "T1", "name": "Test 1", "credit": 3, "grade": "A"},
            {"code": "T2", "name": "Test 2", "credit": 3, "grade": "B"},
        ]
    }
    r = client.post('/api/gpa', json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data['gpa'] == 3.5
    assert data['total_credits'] == 6


def test_duplicate_course_validation():
    payload = {
        "courses": [
            {"code": "DUP", "name": "X", "credit": 3, "grade": "A"},
            {"code": "dup", "name": "Y", "credit": 3, "grade": "B"},
        ]
    }
    r = client.post('/api/gpa', json=payload)
    assert r.status_code == 400


def test_unknown_grade_is_rejected():
    r = client.post('/api/gpa', json={"courses": [{"code": "T1", "credit": 3, "grade": "E"}]})
    assert r.status_code == 400


def test_cgpa_series_with_retake():
    r = client.post('/api/cgpa', json=cgpa_payload())
    assert r.status_code == 200
    data = r.json()
    first, second = data['results']
    assert first['trimester_name'] == 'Spring 2024'
    assert first['cgpa'] == 1.0
    assert second['trimester_name'] == 'Summer 2024'
    # F attempt replaced: (1*4 + 3*3.33 + 3*3.67) / 7
    assert second['cgpa'] == 3.57
    assert data['cgpa'] == 3.57
    assert data['total_credits'] == 7
    assert data['earned_credits'] == 7
    assert data['standing'] == 'Strong Performance'


def test_cgpa_with_prior_record():
    payload = {
        "trimesters": [{"courses": [{"credit": 3, "grade": "A"}]}, {"courses": [{"credit": 3, "grade": "B"}]}],
        "prior_credits": 30,
        "prior_cgpa": 3.0,
    }
    r = client.post('/api/cgpa', json=payload)
    assert r.status_code == 200
    assert r.json()['results'][0]['cgpa'] == 3.09


def test_cgpa_requires_a_graded_course():
    r = client.post('/api/cgpa', json={"trimesters": [{"courses": [{"credit": 3, "grade": ""}]}]})
    assert r.status_code == 400


def test_retake_needs_previous_grade():
    payload = {"trimesters": [{"courses": [{"code": "X", "credit": 3, "grade": "A", "is_retake": True}]}]}
    r = client.post('/api/cgpa', json=payload)
    assert r.status_code == 400
    assert 'previous grade' in r.json()['detail']


def test_prior_cgpa_out_of_range():
    r = client.post('/api/cgpa', json={"trimesters": [], "prior_cgpa": 4.5})
    assert r.status_code == 422


def test_marks():
    payload = {
        "assessments": [
            {"name": "CT1", "obtained": 18, "total": 20, "weight": 20, "is_ct": True},
            {"name": "Mid", "obtained": 20, "total": 30, "weight": 30},
            {"name": "Final", "obtained": 0, "total": 100, "weight": 50},
        ],
        "target_grade": "b",
    }
    r = client.post('/api/grades/marks', json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data['summary']['marks'] == 38
    assert data['required_final'] == 80


def test_marks_unknown_target():
    r = client.post('/api/grades/marks', json={"assessments": [], "target_grade": "Z"})
    assert r.status_code == 400


def test_projection():
    payload = {"current_cgpa": 3.0, "completed_credits": 60, "program_id": "bscse", "target_cgpa": 3.5, "projected_gpa": 3.5}
    r = client.post('/api/project', json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data['total_credits'] == 137
    assert data['remaining_credits'] == 77
    assert data['achievable'] is True
    assert data['needed_avg_gpa'] == round((3.5 * 137 - 180) / 77, 2)
    assert data['projected_cgpa'] == round((180 + 3.5 * 77) / 137, 2)


def test_projection_out_of_reach():
    payload = {"current_cgpa": 2.0, "completed_credits": 130, "total_credits": 137, "target_cgpa": 3.9}
    r = client.post('/api/project', json=payload)
    data = r.json()
    assert data['achievable'] is False
    assert data['needed_avg_gpa'] == 4.0


def test_programs():
    r = client.get('/api/programs')
    assert r.status_code == 200
    ids = {p['id'] for p in r.json()}
    assert len(ids) == 12
    assert {'bscse', 'bsds', 'bseee', 'bpharm', 'bba', 'ba_english'} <= ids

    r = client.get('/api/programs/bscse')
    assert r.status_code == 200
    assert r.json()['total_credits'] == 137

    r = client.get('/api/programs/bscivil')
    assert r.status_code == 200
    assert r.json()['total_credits'] == 151.5

    assert client.get('/api/programs/unknown').status_code == 404


def test_career_tracks():
    r = client.get('/api/careers/bscse')
    assert r.status_code == 200
    assert 'ai-ml' in {t['id'] for t in r.json()}
    assert client.get('/api/careers/unknown').json() == []


def test_career_suggest_from_trimesters():
    payload = {"program_id": "bscse", **cgpa_payload()}
    r = client.post('/api/careers/suggest', json=payload)
    assert r.status_code == 200
    data = r.json()
    percents = [s['match_percent'] for s in data]
    assert percents == sorted(percents, reverse=True)
    assert all(0 <= p <= 100 for p in percents)


def test_career_roadmap():
    payload = {"program_id": "bscse", "track_id": "software-eng", **cgpa_payload()}
    r = client.post('/api/careers/roadmap', json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data['track']['id'] == 'software-eng'
    assert data['target_cgpa'] == 3.5
    assert 3 <= len(data['action_items']) <= 5
    for trimester in data['trimester_plan']:
        assert trimester['credits'] <= 15


def test_career_roadmap_unknown_track():
    payload = {"program_id": "bscse", "track_id": "nope", "completed": [{"code": "CSE1111", "grade": "A", "point": 4}]}
    r = client.post('/api/careers/roadmap', json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data['track'] is None
    assert data['overall_readiness'] == 0


def test_degree_progress():
    payload = {"program_id": "bscse", "completed": [{"code": "CSE 1110", "grade": "A", "point": 4}], "limit": 5}
    r = client.post('/api/degree-progress', json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data['progress']['credits_completed'] == 1
    assert len(data['recommendations']) == 5
    assert data['domain_strengths'][0]['domain_id'] == 'programming'

    payload['program_id'] = 'nope'
    assert client.post('/api/degree-progress', json=payload).status_code == 404


def test_student_id():
    r = client.get('/api/student-id/0112330123')
    assert r.status_code == 200
    assert r.json()['program_id'] == 'bscse'
    r = client.get('/api/student-id/0412330123')
    assert r.json()['program_id'] == 'bpharm'
    assert r.json()['is_trimester'] is False
    assert client.get('/api/student-id/12').status_code == 404


def test_export_csv():
    r = client.post('/api/export/csv', json=cgpa_payload())
    assert r.status_code == 200
    assert r.headers['content-type'].startswith('text/csv')
    text = r.text
    assert 'CSE 2213' in text
    assert 'Summer 2024' in text


def test_export_pdf():
    r = client.post('/api/export/pdf', json=cgpa_payload())
    assert r.status_code in (200, 503)
    if r.status_code == 200:
        assert r.content.startswith(b'%PDF')


def test_selftest():
    r = client.get('/api/selftest')
    assert r.status_code == 200
    data = r.json()
    assert data['ok'] is True
    assert len(data['cgpa']) == 2


# ---------- Persistence ----------

class FakeCollection:
    def __init__(self):
        self.docs = []

    def _matches(self, doc, flt):
        return all(doc.get(k) == v for k, v in flt.items())

    def find_one_and_update(self, flt, update, upsert=False, return_document=None):
        doc = next((d for d in self.docs if self._matches(d, flt)), None)
        if doc is None and upsert:
            doc = {**flt, "_id": len(self.docs) + 1, **update.get("$setOnInsert", {})}
            self.docs.append(doc)
        if doc is None:
            return None
        doc.update(update["$set"])
        return dict(doc)

    def find(self, flt):
        return FakeCursor([dict(d) for d in self.docs if self._matches(d, flt)])

    def delete_many(self, flt):
        before = len(self.docs)
        self.docs = [d for d in self.docs if not self._matches(d, flt)]
        return SimpleNamespace(deleted_count=before - len(self.docs))


class FakeCursor(list):
    def limit(self, n):
        return FakeCursor(self[:n])


def test_records_without_database(monkeypatch):
    monkeypatch.setattr(database, 'db', None)
    r = client.get('/api/records/u1')
    assert r.status_code == 500


def test_records_round_trip(monkeypatch):
    monkeypatch.setattr(database, 'db', defaultdict(FakeCollection))

    r = client.get('/api/records/u1')
    assert r.status_code == 200
    assert r.json()['trimesters'] == []

    r = client.post('/api/records/u1', json=cgpa_payload())
    assert r.status_code == 200
    saved = r.json()
    assert saved['user_id'] == 'u1'
    assert saved['results'][-1]['cgpa'] == 3.57

    r = client.get('/api/records/u1')
    assert len(r.json()['trimesters']) == 2

    r = client.delete('/api/records/u1')
    assert r.json()['deleted'] == 1


def test_preferences(monkeypatch):
    monkeypatch.setattr(database, 'db', defaultdict(FakeCollection))

    assert client.get('/api/preferences/u2').status_code == 404
    r = client.post('/api/preferences', json={"user_id": "u2", "program_id": "bscse", "career_goal_id": "ai-ml"})
    assert r.status_code == 200
    r = client.get('/api/preferences/u2')
    assert r.json()['career_goal_id'] == 'ai-ml'

    r = client.post('/api/preferences', json={"user_id": "u2", "program_id": "zzz"})
    assert r.status_code == 400


def test_preferences_save_twice_updates_one_document(monkeypatch):
    fake = defaultdict(FakeCollection)
    monkeypatch.setattr(database, 'db', fake)

    first = client.post('/api/preferences', json={"user_id": "u3", "career_goal_id": "ai-ml"}).json()
    second = client.post('/api/preferences', json={"user_id": "u3", "career_goal_id": "web-mobile"}).json()
    assert second['_id'] == first['_id'] == '1'
    assert second['created_at'] == first['created_at']
    assert second['career_goal_id'] == 'web-mobile'
    assert len(fake['academic_preferences'].docs) == 1
