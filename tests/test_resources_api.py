import unittest

from fastapi.testclient import TestClient

from app.api.resources import ResourceRegistry
from app.main import create_app
from app.services.list_handlers import BackwardPipelineRunListHandler, PipelineRunListHandler
from tests.resource_factories import at, make_pipeline_run, make_template


class ResourcesApiTests(unittest.TestCase):
    def setUp(self):
        self.templates = {
            "devops-p1": [make_template("template1"), make_template("template2"), make_template("template3")],
        }
        self.runs = [
            make_pipeline_run("run-old-start", created=at(5), started=at(6)),
            make_pipeline_run("run-new-start", created=at(0), started=at(30)),
        ]
        registry = ResourceRegistry()
        registry.register("templates", lambda namespace: self.templates.get(namespace, []))
        registry.register(
            "pipelineruns",
            lambda namespace: self.runs,
            handler=PipelineRunListHandler(),
            backward_handler=BackwardPipelineRunListHandler(),
        )
        self.client = TestClient(create_app(registry))

    def tearDown(self):
        self.client.close()

    def _names(self, payload) -> list[str]:
        return [item["metadata"]["name"] for item in payload["items"]]

    def test_list_sorted_by_name(self):
        response = self.client.get("/api/v1alpha3/namespaces/devops-p1/templates?sortBy=name&ascending=true")
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["totalItems"], 3)
        self.assertEqual(self._names(payload), ["template1", "template2", "template3"])

    def test_page_beyond_range(self):
        response = self.client.get("/api/v1alpha3/namespaces/devops-p1/templates?sortBy=name&ascending=true&page=10")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"items": [], "totalItems": 3})

    def test_malformed_parameters_do_not_fail(self):
        response = self.client.get("/api/v1alpha3/namespaces/devops-p1/templates?page=abc&limit=add&ascending=ssss")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["totalItems"], 3)

    def test_empty_namespace(self):
        response = self.client.get("/api/v1alpha3/namespaces/devops-p2/templates")
        self.assertEqual(response.json(), {"items": [], "totalItems": 0})

    def test_unknown_kind_is_404(self):
        response = self.client.get("/api/v1alpha3/namespaces/devops-p1/widgets")
        self.assertEqual(response.status_code, 404)

    def test_pipeline_runs_use_backward_handler_by_default(self):
        payload = self.client.get("/api/v1alpha3/namespaces/devops-p1/pipelineruns").json()
        self.assertEqual(self._names(payload), ["run-old-start", "run-new-start"])

    def test_pipeline_runs_order_by_start_time_when_not_backward(self):
        payload = self.client.get("/api/v1alpha3/namespaces/devops-p1/pipelineruns?backward=false").json()
        self.assertEqual(self._names(payload), ["run-new-start", "run-old-start"])

    def test_kinds_are_listed(self):
        response = self.client.get("/api/v1alpha3/kinds")
        self.assertEqual(response.json(), {"kinds": ["pipelineruns", "templates"]})


if __name__ == "__main__":
    unittest.main()
