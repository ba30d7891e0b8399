import os
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from backend_fastapi.api.deps import list_tasks_use_case
from backend_fastapi.main import app
from infrastructure.memory.session.store import reset_store


class OperationsApiTests(unittest.TestCase):
    def setUp(self) -> None:
        reset_store()
        self.env = patch.dict(os.environ, {"SEED_DEMO_TASKS": "true", "TASK_STORE": "memory"})
        self.env.start()
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.env.stop()
        reset_store()

    def _run(self, operation: str, **arguments):
        return self.client.post(
            "/operations", json={"operation": operation, "arguments": arguments}
        )

    def test_add_task(self) -> None:
        response = self._run(
            "addTask", title="C", description="desc", completed=False, duration=30
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "data": {
                    "addTask": {
                        "id": "3",
                        "title": "C",
                        "description": "desc",
                        "completed": False,
                        "duration": 30,
                    }
                }
            },
        )
        self.assertEqual(len(self._run("listTasks").json()["data"]["listTasks"]), 3)

    def test_list_tasks_sin_argumentos(self) -> None:
        response = self.client.post("/operations", json={"operation": "listTasks"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            [t["title"] for t in response.json()["data"]["listTasks"]], ["A", "B"]
        )

    def test_complete_task(self) -> None:
        task = self._run("completeTask", id="1").json()["data"]["completeTask"]

        self.assertEqual(task["id"], "1")
        self.assertTrue(task["completed"])
        self.assertTrue(self._run("getTask", id="1").json()["data"]["getTask"]["completed"])

    def test_change_description(self) -> None:
        task = self._run("changeDescription", id="2", description="updated").json()

        self.assertEqual(task["data"]["changeDescription"]["description"], "updated")
        self.assertEqual(task["data"]["changeDescription"]["title"], "B")

    def test_delete_task(self) -> None:
        removed = self._run("deleteTask", id="1").json()["data"]["deleteTask"]

        self.assertEqual(removed["id"], "1")
        self.assertIsNone(self._run("getTask", id="1").json()["data"]["getTask"])
        listed = self._run("listTasks").json()["data"]["listTasks"]
        self.assertEqual([t["id"] for t in listed], ["2"])

    def test_id_inexistente_devuelve_null(self) -> None:
        before = self._run("listTasks").json()

        for operation, extra in (
            ("getTask", {}),
            ("completeTask", {}),
            ("changeDescription", {"description": "x"}),
            ("deleteTask", {}),
        ):
            response = self._run(operation, id="999", **extra)
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json(), {"data": {operation: None}})

        self.assertEqual(self._run("listTasks").json(), before)

    def test_operacion_desconocida_es_422(self) -> None:
        response = self._run("renameTask", id="1", title="Z")

        self.assertEqual(response.status_code, 422)

    def test_argumentos_con_tipo_incorrecto_son_422(self) -> None:
        response = self._run("addTask", title="C", description="d", completed="nope")

        self.assertEqual(response.status_code, 422)
        self.assertEqual(len(self._run("listTasks").json()["data"]["listTasks"]), 2)

    def test_fallo_inesperado_es_500(self) -> None:
        class BrokenListTasks:
            def execute(self):
                raise RuntimeError("almacén caído")

        app.dependency_overrides[list_tasks_use_case] = BrokenListTasks

        response = self._run("listTasks")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"detail": "almacén caído"})


if __name__ == "__main__":
    unittest.main()
