"""Dashboard web application for the clinic registry.

This module exposes a small Flask application over a single
:class:`booking.ClinicRegistry`. JSON endpoints mirror the four booking
operations and ``/dashboard`` renders the current professionals and
appointments as HTML tables. Data lives only as long as the process.
"""
from __future__ import annotations

import os
from typing import Any, Dict, List, MutableMapping, Optional, Tuple

from flask import Flask, Response, jsonify, render_template_string, request

from booking import ClinicRegistry, OperationResult
from clinic.errors import INVALID_DOCTOR_ID, PHONE_NUMBER_NOT_FOUND


def _status_for(result: OperationResult, success_status: int) -> int:
    if result.success:
        return success_status
    if result.reason in (INVALID_DOCTOR_ID, PHONE_NUMBER_NOT_FOUND):
        return 404
    return 400


def build_dashboard_context(registry: ClinicRegistry) -> MutableMapping[str, object]:
    appointments = [appointment.to_dict() for appointment in registry.appointments]
    return {
        "general_practitioners": [gp.to_dict() for gp in registry.general_practitioners()],
        "cardiologists": [cd.to_dict() for cd in registry.cardiologists()],
        "appointments": appointments,
        "logs": registry.activity.entries(),
    }


def _coerce_doctor_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.strip().isdigit():
        return int(value.strip())
    return None


def _parse_booking_request(payload: Any) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
    if not isinstance(payload, dict):
        return None, "Request body must be a JSON object."
    doctor_id = _coerce_doctor_id(payload.get("doctor_id"))
    if doctor_id is None:
        return None, "doctor_id must be an integer."

    booking: Dict[str, Any] = {"doctor_id": doctor_id}
    for key in ("patient_name", "patient_mobile", "time_slot"):
        value = payload.get(key)
        if value is not None and not isinstance(value, str):
            return None, f"{key} must be a string."
        booking[key] = value
    return booking, None


dashboard_template = """
<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\">
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\">
    <meta http-equiv=\"refresh\" content=\"60\">
    <title>Clinic Appointments</title>
    <link
      href=\"https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css\"
      rel=\"stylesheet\"
      integrity=\"sha384-QWTKZyjpPEjISv5WaRU9OFeRpok6YctnYmDr5pNlyT2bRjXh0JMhjY6hW+ALEwIH\"
      crossorigin=\"anonymous\"
    >
  </head>
  <body class=\"bg-light\">
    <nav class=\"navbar navbar-expand-lg navbar-dark bg-primary\">
      <div class=\"container-fluid\">
        <a class=\"navbar-brand\" href=\"#\">Clinic Appointments</a>
      </div>
    </nav>
    <main class=\"container my-4\">
      <section class=\"row g-4\">
        <div class=\"col-lg-6\">
          <div class=\"card shadow-sm h-100\">
            <div class=\"card-header bg-success text-white\">General Practitioners</div>
            <div class=\"card-body\">
              {% if general_practitioners %}
                <table class=\"table table-sm table-striped\">
                  <thead>
                    <tr>
                      <th scope=\"col\">ID</th>
                      <th scope=\"col\">Name</th>
                      <th scope=\"col\">Age</th>
                      <th scope=\"col\">Max Consultation Time</th>
                      <th scope=\"col\">Bulk Billing</th>
                    </tr>
                  </thead>
                  <tbody>
                    {% for gp in general_practitioners %}
                      <tr>
                        <td>{{ gp.id }}</td>
                        <td>{{ gp.name }}</td>
                        <td>{{ gp.age }}</td>
                        <td>{{ gp.max_consultation_time }}</td>
                        <td>{{ 'Yes' if gp.bulk_billing else 'No' }}</td>
                      </tr>
                    {% endfor %}
                  </tbody>
                </table>
              {% else %}
                <p class=\"text-muted mb-0\">No general practitioners registered.</p>
              {% endif %}
            </div>
          </div>
        </div>
        <div class=\"col-lg-6\">
          <div class=\"card shadow-sm h-100\">
            <div class=\"card-header bg-info text-white\">Cardiologists</div>
            <div class=\"card-body\">
              {% if cardiologists %}
                <table class=\"table table-sm table-striped\">
                  <thead>
                    <tr>
                      <th scope=\"col\">ID</th>
                      <th scope=\"col\">Name</th>
                      <th scope=\"col\">Age</th>
                      <th scope=\"col\">Subspecialty</th>
                      <th scope=\"col\">Cath Lab Access</th>
                    </tr>
                  </thead>
                  <tbody>
                    {% for cd in cardiologists %}
                      <tr>
                        <td>{{ cd.id }}</td>
                        <td>{{ cd.name }}</td>
                        <td>{{ cd.age }}</td>
                        <td>{{ cd.subspecialty }}</td>
                        <td>{{ 'Yes' if cd.has_cath_lab_access else 'No' }}</td>
                      </tr>
                    {% endfor %}
                  </tbody>
                </table>
              {% else %}
                <p class=\"text-muted mb-0\">No cardiologists registered.</p>
              {% endif %}
            </div>
          </div>
        </div>
      </section>
      <section class=\"mt-5\">
        <div class=\"card shadow-sm\">
          <div class=\"card-header bg-warning text-dark\">Appointments ({{ appointments|length }})</div>
          <div class=\"card-body\">
            {% if appointments %}
              <table class=\"table table-sm table-striped\">
                <thead>
                  <tr>
                    <th scope=\"col\">#</th>
                    <th scope=\"col\">Patient</th>
                    <th scope=\"col\">Phone</th>
                    <th scope=\"col\">Time</th>
                    <th scope=\"col\">Doctor</th>
                    <th scope=\"col\">Type</th>
                  </tr>
                </thead>
                <tbody>
                  {% for appointment in appointments %}
                    <tr>
                      <td>{{ loop.index }}</td>
                      <td>{{ appointment.patient_name or 'N/A' }}</td>
                      <td>{{ appointment.patient_mobile or 'N/A' }}</td>
                      <td>{{ appointment.time_slot }}</td>
                      <td>{{ appointment.doctor_name or 'N/A' }}</td>
                      <td>{{ appointment.doctor_type }}</td>
                    </tr>
                  {% endfor %}
                </tbody>
              </table>
            {% else %}
              <p class=\"text-muted mb-0\">No Available Appointment</p>
            {% endif %}
          </div>
        </div>
      </section>
      <section class=\"mt-5\">
        <div class=\"card shadow-sm\">
          <div class=\"card-header bg-secondary text-white\">Activity Log</div>
          <div class=\"card-body\">
            {% if logs %}
              <table class=\"table table-sm table-striped\">
                <thead>
                  <tr>
                    <th scope=\"col\">Timestamp</th>
                    <th scope=\"col\">Operation</th>
                    <th scope=\"col\">Status</th>
                    <th scope=\"col\">Message</th>
                  </tr>
                </thead>
                <tbody>
                  {% for log in logs %}
                    <tr>
                      <td>{{ log.recorded_at }}</td>
                      <td>{{ log.operation }}</td>
                      <td>{{ log.status }}</td>
                      <td>{{ log.message or '' }}</td>
                    </tr>
                  {% endfor %}
                </tbody>
              </table>
            {% else %}
              <p class=\"text-muted mb-0\">No activity recorded yet.</p>
            {% endif %}
          </div>
        </div>
      </section>
    </main>
  </body>
</html>
"""


def create_app(registry: Optional[ClinicRegistry] = None) -> Flask:
    """Build the Flask application serving ``registry``."""

    app = Flask(__name__)
    registry = registry or ClinicRegistry.with_default_professionals()
    app.config["CLINIC_REGISTRY"] = registry

    @app.route("/professionals", methods=["GET"])
    def professionals() -> Response:
        return jsonify(
            {
                "general_practitioners": [gp.to_dict() for gp in registry.general_practitioners()],
                "cardiologists": [cd.to_dict() for cd in registry.cardiologists()],
            }
        )

    @app.route("/appointments", methods=["GET"])
    def list_appointments() -> Response:
        appointments: List[Dict[str, Any]] = [
            appointment.to_dict() for appointment in registry.appointments
        ]
        return jsonify({"total": len(appointments), "appointments": appointments})

    @app.route("/appointments", methods=["POST"])
    def create_appointment() -> Tuple[Response, int]:
        booking, error = _parse_booking_request(request.get_json(silent=True))
        if booking is None:
            return jsonify({"success": False, "message": error, "reason": None}), 400
        result = registry.create_appointment(**booking)
        return jsonify(result.to_dict()), _status_for(result, 201)

    @app.route("/appointments/<mobile_number>", methods=["DELETE"])
    def cancel_appointment(mobile_number: str) -> Tuple[Response, int]:
        result = registry.cancel_booking(mobile_number)
        return jsonify(result.to_dict()), _status_for(result, 200)

    @app.route("/activity", methods=["GET"])
    def activity() -> Response:
        return jsonify(registry.activity.entries())

    @app.route("/dashboard", methods=["GET"])
    def dashboard() -> str:
        return render_template_string(dashboard_template, **build_dashboard_context(registry))

    return app


if __name__ == "__main__":
    create_app().run(
        host="0.0.0.0",
        port=int(os.environ.get("PORT", "5000")),
        debug=False,
    )
