import unittest
from unittest.mock import Mock

from booking import ClinicRegistry
from ui.dashboard import create_app


class DashboardTests(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = ClinicRegistry.with_default_professionals(notifier=Mock())
        self.client = create_app(self.registry).test_client()

    def _book(self, **overrides):
        payload = {
            "doctor_id": 2,
            "patient_name": "YuZt",
            "patient_mobile": "18466209754",
            "time_slot": "09:30",
        }
        payload.update(overrides)
        return self.client.post("/appointments", json=payload)

    def test_professionals_are_grouped(self) -> None:
        response = self.client.get("/professionals")

        self.assertEqual(response.status_code, 200)
        body = response.get_json()
        self.assertEqual([gp["id"] for gp in body["general_practitioners"]], [1, 2, 3])
        self.assertEqual([cd["id"] for cd in body["cardiologists"]], [4, 5])

    def test_create_appointment(self) -> None:
        response = self._book()

        self.assertEqual(response.status_code, 201)
        self.assertTrue(response.get_json()["success"])
        listing = self.client.get("/appointments").get_json()
        self.assertEqual(listing["total"], 1)
        self.assertEqual(listing["appointments"][0]["doctor_name"], "Bob Johnson")

    def test_create_appointment_with_unknown_doctor(self) -> None:
        response = self._book(doctor_id=99)

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()["reason"], "invalid doctor id")
        self.assertEqual(self.registry.appointments, ())

    def test_create_appointment_with_blank_field(self) -> None:
        response = self._book(time_slot="  ")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["reason"], "appointment time empty")

    def test_create_appointment_with_malformed_body(self) -> None:
        self.assertEqual(self._book(doctor_id="two").status_code, 400)
        for doctor_id in (2.9, True, None, "2.0", "-1"):
            with self.subTest(doctor_id=doctor_id):
                response = self._book(doctor_id=doctor_id)

                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json()["message"], "doctor_id must be an integer.")
        self.assertEqual(self.registry.appointments, ())
        self.assertEqual(
            self.client.post("/appointments", data="nope", content_type="text/plain").status_code,
            400,
        )

    def test_numeric_string_doctor_id_is_accepted(self) -> None:
        response = self._book(doctor_id="4")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(self.registry.appointments[0].doctor.name, "Carol Dan")

    def test_non_string_patient_fields_are_rejected(self) -> None:
        for field in ("patient_name", "patient_mobile", "time_slot"):
            with self.subTest(field=field):
                response = self._book(**{field: 123})

                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json()["message"], f"{field} must be a string.")
        self.assertEqual(self.registry.appointments, ())

    def test_cancel_appointment(self) -> None:
        self._book()

        response = self.client.delete("/appointments/18466209754")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.registry.appointments, ())
        self.assertEqual(self.client.delete("/appointments/18466209754").status_code, 404)

    def test_activity_and_dashboard(self) -> None:
        self._book()

        activity = self.client.get("/activity").get_json()
        page = self.client.get("/dashboard")

        self.assertEqual(activity[0]["operation"], "create_appointment")
        self.assertEqual(page.status_code, 200)
        self.assertIn(b"Bob Johnson", page.data)
        self.assertIn(b"Appointments (1)", page.data)


if __name__ == "__main__":
    unittest.main()
