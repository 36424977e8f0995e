"""Tests for StressScenarioData reload semantics and the export path."""
import pytest

from conftest import build_document, build_stress_test, discount_curve
from stress_scenarios.domain.scenario_set import ScenarioSet
from stress_scenarios.errors import StructuralError, UnsupportedOperationError
from stress_scenarios.services.scenario_store import StressScenarioData
from stress_scenarios.services.stress_export import export_stress_tests


class TestStressScenarioData:
    def test_initially_empty(self):
        store = StressScenarioData()
        assert len(store.data) == 0
        assert not store.is_loaded
        assert store.get_status() == {"status": "not_loaded"}

    def test_reload_replaces_contents(self):
        store = StressScenarioData()
        store.from_string(build_document(
            build_stress_test("Old1", DiscountCurves=discount_curve("USD")),
            build_stress_test("Old2"),
        ))
        store.from_string(build_document(build_stress_test("New", DiscountCurves=discount_curve("EUR"))))

        assert store.data.labels == ["New"]
        assert set(store.data[0].discount_curve_shifts) == {"EUR"}

    def test_failed_reload_keeps_previous(self):
        store = StressScenarioData()
        store.from_string(build_document(build_stress_test("Kept")))
        with pytest.raises(StructuralError):
            store.from_string(build_document(build_stress_test("Broken", omit=("FxSpots",))))
        assert store.data.labels == ["Kept"]

    def test_from_xml_and_file(self, tmp_path, sample_xml, sample_root):
        store = StressScenarioData()
        assert len(store.from_xml(sample_root)) == 2

        path = tmp_path / "stress.xml"
        path.write_text(build_document(build_stress_test("FromFile")))
        store.from_file(path)
        assert store.data.labels == ["FromFile"]
        assert store.get_status()["source"] == str(path)

    def test_status_when_loaded(self, sample_xml):
        store = StressScenarioData()
        store.from_string(sample_xml)
        status = store.get_status()
        assert status["status"] == "loaded"
        assert status["stress_test_count"] == 2
        assert status["labels"] == ["Parallel_Up", "Empty_Scenario"]

    def test_singleton(self):
        assert StressScenarioData.get() is StressScenarioData.get()
        first = StressScenarioData.get()
        StressScenarioData.reset()
        assert StressScenarioData.get() is not first

    def test_to_xml_unsupported(self, sample_xml):
        store = StressScenarioData()
        store.from_string(sample_xml)
        with pytest.raises(UnsupportedOperationError, match="not supported"):
            store.to_xml()
        assert len(store.data) == 2


class TestExport:
    def test_unsupported(self):
        with pytest.raises(UnsupportedOperationError):
            export_stress_tests(ScenarioSet())

    def test_is_not_implemented_error(self):
        with pytest.raises(NotImplementedError):
            export_stress_tests(ScenarioSet())

    def test_destination_untouched(self, tmp_path):
        target = tmp_path / "out.xml"
        with pytest.raises(UnsupportedOperationError):
            export_stress_tests(ScenarioSet(), target)
        assert not target.exists()

        target.write_text("<Existing/>")
        with pytest.raises(UnsupportedOperationError):
            export_stress_tests(ScenarioSet(), target)
        assert target.read_text() == "<Existing/>"
