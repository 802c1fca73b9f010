import unittest
from datetime import datetime, timedelta
from fastapi.testclient import TestClient

from planwise.api.api_run import create_app
from planwise.infra.Plan_Repository import plans_table
from planwise.tests.helpers import FailingRepository, FakeCompletionClient, memory_repository


class TestPlansAPI(unittest.TestCase):

    def setUp(self):
        self.repo = memory_repository()
        self.client = TestClient(create_app(self.repo, FakeCompletionClient()))

    def test_empty_list(self):
        resp = self.client.get('/plans')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    def test_plans_shape(self):
        self.repo.insert_plan("Week 1", ["Plan meals", "Exercise"], "1. Sleep")
        resp = self.client.get('/plans')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(len(data), 1)
        for key in ('id', 'goal', 'tasks', 'feedback', 'created_at'):
            self.assertIn(key, data[0])
        self.assertEqual(data[0]['tasks'], ["Plan meals", "Exercise"])
        self.assertEqual(data[0]['goal'], "Week 1")

    def test_newest_first_max_twenty(self):
        base = datetime(2024, 5, 1, 8, 0, 0)
        with self.repo.engine.begin() as conn:
            for n in range(22):
                conn.execute(plans_table.insert().values(
                    goal=f"plan {n}", tasks='["x"]', feedback="f", created_at=base + timedelta(hours=n)))
        data = self.client.get('/plans').json()
        self.assertEqual(len(data), 20)
        self.assertEqual(data[0]['goal'], "plan 21")
        self.assertEqual(data[-1]['goal'], "plan 2")

    def test_bad_rows_do_not_fail_request(self):
        self.repo.insert_plan("good", ["x"], "f")
        with self.repo.engine.begin() as conn:
            conn.execute(plans_table.insert().values(goal="broken", tasks="[]", feedback=None,
                                                     created_at=datetime(2020, 1, 1)))
        resp = self.client.get('/plans')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([p['goal'] for p in resp.json()], ["good"])

    def test_query_failure_is_500(self):
        client = TestClient(create_app(FailingRepository(), FakeCompletionClient()))
        resp = client.get('/plans')
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Failed to fetch plans"})

    def test_unknown_route_uses_error_body(self):
        resp = self.client.get('/no-such-route')
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Not Found"})

    def test_missing_table_is_500(self):
        client = TestClient(create_app(memory_repository(create_schema=False), FakeCompletionClient()))
        resp = client.get('/plans')
        self.assertEqual(resp.status_code, 500)


if __name__ == '__main__':
    unittest.main()
