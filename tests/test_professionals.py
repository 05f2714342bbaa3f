import unittest
from dataclasses import FrozenInstanceError

from clinic import (
    Cardiologist,
    GeneralPractitioner,
    ProfessionalKind,
    format_base_details,
    professional_from_dict,
    professional_header,
)


class ProfessionalFormattingTests(unittest.TestCase):
    def test_general_practitioner_row_uses_fixed_width_columns(self) -> None:
        gp = GeneralPractitioner(1, "Alice Smith", 35, "General Practitioner", 15, True)

        expected = (
            "1    "
            "Alice Smith    "
            "35   "
            "General Practitioner     "
            "15                       "
            "Yes  "
            "\n"
        )
        self.assertEqual(gp.format_details(), expected)

    def test_cardiologist_row_renders_no_for_missing_cath_lab(self) -> None:
        cardiologist = Cardiologist(4, "Carol Dan", 30, "Cardiologist", "Electrophysiology", False)

        row = cardiologist.format_details()

        self.assertTrue(row.startswith("4    Carol Dan      30   Cardiologist             "))
        self.assertTrue(row.endswith("Electrophysiology        No   \n"))
        self.assertEqual(len(row), 5 + 15 + 5 + 25 + 25 + 5 + 1)

    def test_long_values_are_not_truncated(self) -> None:
        gp = GeneralPractitioner(7, "Bartholomew Featherstonehaugh", 61, "GP", 30, False)

        self.assertIn("Bartholomew Featherstonehaugh", format_base_details(gp))

    def test_headers_per_kind(self) -> None:
        gp_header = professional_header(ProfessionalKind.GENERAL_PRACTITIONER)
        cd_header = professional_header(ProfessionalKind.CARDIOLOGIST)

        self.assertTrue(gp_header.startswith("ID   Name           Age  Profession               "))
        self.assertTrue(gp_header.endswith("Max Consultation Time    Bulk Billing Available\n"))
        self.assertTrue(cd_header.endswith("Subspecialty             Cath Lab Access\n"))


class ProfessionalModelTests(unittest.TestCase):
    def test_default_construction_uses_placeholders(self) -> None:
        gp = GeneralPractitioner()
        cardiologist = Cardiologist()

        self.assertEqual((gp.id, gp.name, gp.age, gp.profession), (0, "Unknown", 0, "Unknown"))
        self.assertEqual(gp.max_consultation_time, 0)
        self.assertTrue(gp.bulk_billing)
        self.assertEqual(cardiologist.subspecialty, "Unknown")
        self.assertTrue(cardiologist.has_cath_lab_access)

    def test_kind_is_fixed_per_variant(self) -> None:
        self.assertIs(GeneralPractitioner().kind, ProfessionalKind.GENERAL_PRACTITIONER)
        self.assertIs(Cardiologist().kind, ProfessionalKind.CARDIOLOGIST)
        self.assertEqual(ProfessionalKind.CARDIOLOGIST.label, "Cardiologist")

    def test_fields_are_read_only(self) -> None:
        gp = GeneralPractitioner(1, "Alice Smith", 35, "General Practitioner", 15, True)

        with self.assertRaises(FrozenInstanceError):
            gp.name = "Someone Else"  # type: ignore[misc]

    def test_to_dict_includes_variant_fields(self) -> None:
        payload = Cardiologist(5, "Peter Quill", 55, "Cardiologist", "Vascular Medicine", True).to_dict()

        self.assertEqual(payload["kind"], "cardiologist")
        self.assertEqual(payload["subspecialty"], "Vascular Medicine")
        self.assertTrue(payload["has_cath_lab_access"])


class ProfessionalFromDictTests(unittest.TestCase):
    def test_builds_general_practitioner(self) -> None:
        gp = professional_from_dict(
            {
                "kind": "general_practitioner",
                "id": "3",
                "name": "Clara Lee",
                "age": 25,
                "max_consultation_time": 15,
                "bulk_billing": "no",
            }
        )

        self.assertEqual(gp, GeneralPractitioner(3, "Clara Lee", 25, "General Practitioner", 15, False))

    def test_builds_cardiologist(self) -> None:
        cardiologist = professional_from_dict(
            {
                "kind": "cardiologist",
                "id": 4,
                "name": "Carol Dan",
                "age": 30,
                "profession": "Cardiologist",
                "subspecialty": "Electrophysiology",
            }
        )

        self.assertIsInstance(cardiologist, Cardiologist)
        self.assertTrue(cardiologist.has_cath_lab_access)

    def test_rejects_unknown_kind(self) -> None:
        with self.assertRaises(ValueError):
            professional_from_dict({"kind": "dentist", "id": 1, "name": "X", "age": 40})

    def test_rejects_missing_fields(self) -> None:
        with self.assertRaises(ValueError):
            professional_from_dict({"kind": "cardiologist", "name": "X", "age": 40})

    def test_rejects_non_mapping(self) -> None:
        with self.assertRaises(ValueError):
            professional_from_dict(["cardiologist"])  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
