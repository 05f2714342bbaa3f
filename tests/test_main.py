import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import Mock, patch

from booking import ClinicRegistry
from orchestrator import main as cli


class DemoTests(unittest.TestCase):
    def test_demo_leaves_three_appointments(self) -> None:
        registry = ClinicRegistry.with_default_professionals(notifier=Mock())
        output = []

        cli.run_demo(registry, printer=output.append)

        text = "\n".join(output)
        self.assertEqual(len(registry.appointments), 3)
        self.assertIn("Display Appointment List ( Total 4 )", text)
        self.assertIn("Display Appointment List ( Total 3 )", text)
        self.assertIn(
            "Successfully cancelled the appointment of patient with phone number 18466209754",
            text,
        )
        self.assertNotIn("18466209754", registry.list_appointments())

    def test_main_runs_demo_by_default(self) -> None:
        buffer = io.StringIO()
        with patch.object(cli, "build_notifier", return_value=Mock()), redirect_stdout(buffer):
            exit_code = cli.main([])

        self.assertEqual(exit_code, 0)
        self.assertIn("Show Information of All Health Professionals", buffer.getvalue())

    def test_main_uses_seed_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            seed = Path(tmp) / "seed.json"
            seed.write_text(
                json.dumps(
                    [{"kind": "cardiologist", "id": 8, "name": "Zed Heart", "age": 44,
                      "subspecialty": "Imaging"}]
                ),
                encoding="utf-8",
            )
            registry = cli.build_registry(str(seed))

        self.assertEqual([p.name for p in registry.professionals], ["Zed Heart"])

    def test_main_reports_bad_seed(self) -> None:
        with self.assertLogs("orchestrator.main", level="ERROR"):
            exit_code = cli.main(["--seed", "/nonexistent/professionals.json"])

        self.assertEqual(exit_code, 1)

    def test_serve_starts_dashboard(self) -> None:
        with patch.object(cli, "run_server") as run_server:
            exit_code = cli.main(["serve", "--port", "8080"])

        self.assertEqual(exit_code, 0)
        run_server.assert_called_once()
        self.assertEqual(run_server.call_args.args[1:], ("127.0.0.1", 8080))


if __name__ == "__main__":
    unittest.main()
