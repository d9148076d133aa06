"""Tests for recorder module."""

import json

import pytest

from driverstep.domains.step import Cmd, Step, StepType
from driverstep.lib.recorder import StepRecorder, get_recorder


@pytest.fixture
def steps(clock, timing):
    before = Step.create(StepType.BEFORE_ACTION, 1, Cmd.GET, timing=timing).update(param1="https://example.com")
    clock.advance(3_000_000)
    after = Step.create(StepType.AFTER_ACTION, 1, Cmd.GET, timing=timing).update(param1="https://example.com")
    failure = Step.create(StepType.FAILURE, 2, Cmd.CLICK, timing=timing).update(issue=RuntimeError("stale"))
    return [before, after, failure]


class TestStepRecorder:
    """Tests for StepRecorder class."""

    def test_initial_state(self):
        recorder = StepRecorder()
        assert recorder.is_recording is False
        assert recorder.get_steps() == []

    def test_ignores_records_when_not_recording(self, steps):
        recorder = StepRecorder()
        recorder.on_step(steps[0])
        assert recorder.get_steps() == []

    def test_records_while_recording(self, steps):
        recorder = StepRecorder()
        recorder.start_recording()
        for step in steps:
            recorder.on_step(step)
        recorder.stop_recording()
        recorder.on_step(steps[0])

        assert recorder.get_steps() == steps
        assert recorder.is_recording is False

    def test_start_recording_clears_previous(self, steps):
        recorder = StepRecorder()
        recorder.start_recording()
        recorder.on_step(steps[0])
        recorder.start_recording()
        assert recorder.get_steps() == []

    def test_get_steps_returns_copy(self, steps):
        recorder = StepRecorder()
        recorder.start_recording()
        recorder.on_step(steps[0])
        recorder.get_steps().clear()
        assert len(recorder.get_steps()) == 1

    def test_metadata(self, steps):
        recorder = StepRecorder()
        recorder.start_recording()
        for step in steps:
            recorder.on_step(step)
        recorder.stop_recording()

        metadata = recorder.get_metadata()
        assert metadata["record_count"] == 3
        assert metadata["step_count"] == 2
        assert metadata["failure_count"] == 1
        assert "started_at" in metadata
        assert "stopped_at" in metadata

    def test_get_failures(self, steps):
        recorder = StepRecorder()
        recorder.start_recording()
        for step in steps:
            recorder.on_step(step)
        assert recorder.get_failures() == [steps[2]]

    def test_clear(self, steps):
        recorder = StepRecorder()
        recorder.start_recording()
        recorder.on_step(steps[0])
        recorder.clear()
        assert recorder.get_steps() == []

    def test_to_dict(self, steps):
        recorder = StepRecorder()
        recorder.start_recording()
        for step in steps:
            recorder.on_step(step)

        data = recorder.to_dict()
        assert [s["record_number"] for s in data["steps"]] == [1, 2, 3]
        assert data["steps"][1]["time_elapsed_step"] == 3_000_000
        assert data["steps"][2]["issue"] == {"type": "RuntimeError", "message": "stale"}

    def test_export_and_load_json(self, steps, tmp_path):
        recorder = StepRecorder(indent=4)
        recorder.start_recording()
        for step in steps:
            recorder.on_step(step)
        recorder.stop_recording()

        path = recorder.export_json(tmp_path / "out" / "steps.json")
        assert path.exists()
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["metadata"]["record_count"] == 3

        loaded = StepRecorder.load_json(path)
        assert [str(s) for s in loaded] == [str(s) for s in steps]

    def test_load_bare_list(self, steps, tmp_path):
        path = tmp_path / "steps.json"
        path.write_text(json.dumps([steps[0].to_dict()]), encoding="utf-8")
        loaded = StepRecorder.load_json(path)
        assert loaded[0].param1 == "https://example.com"


class TestGetRecorder:
    def test_singleton(self):
        assert get_recorder() is get_recorder()


class TestFromConfig:
    def test_indent_from_config(self):
        from driverstep.models.config_models import StepConfig

        recorder = StepRecorder.from_config(StepConfig(EXPORT_INDENT=0))
        assert recorder.indent == 0
        assert recorder.to_json().startswith('{\n"metadata"')
