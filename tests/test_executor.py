import logging

import pytest

from flowproc import metrics
from flowproc.exceptions import InterpreterError, RequiredOutputError
from flowproc.executor import InterpreterExecutor
from flowproc.models import ProcessConfig


def config(inputs=None, outputs=(), required=()):
    return ProcessConfig.build(inputs or {}, outputs, required)


def test_creates_session_with_inputs_and_starts_it(interpreter, executor):
    executor.execute("X", config({"A": 1}, outputs=["B"]))
    session = interpreter.sessions[-1]
    assert session.flow_name == "X"
    assert session.inputs == {"A": 1}
    assert session.started


def test_present_outputs_are_returned(executor):
    assert executor.execute("X", config({"A": 1}, required=["B"])) == {"B": 2}


def test_missing_optional_output_is_omitted(executor):
    assert executor.execute("X", config({}, outputs=["B"])) == {}


def test_missing_required_outputs_are_reported_together(interpreter, executor):
    interpreter.register("Y", lambda **_: {"C": 1})
    with pytest.raises(RequiredOutputError) as exc:
        executor.execute("Y", config(required=["B", "A", "C"]))
    assert exc.value.missing == ["A", "B"]
    assert exc.value.flow_name == "Y"


def test_falsy_values_count_as_present(interpreter, executor):
    interpreter.register("Falsy", lambda **_: {"zero": 0, "empty": "", "no": False})
    out = executor.execute("Falsy", config(required=["zero", "empty", "no"]))
    assert out == {"zero": 0, "empty": "", "no": False}


def test_undeclared_variables_are_not_returned(interpreter, executor):
    interpreter.register("Many", lambda **_: {"B": 1, "Other": 2})
    assert executor.execute("Many", config(outputs=["B"])) == {"B": 1}


def test_unknown_flow_raises_interpreter_error(executor):
    with pytest.raises(InterpreterError):
        executor.execute("Missing", config())


def test_flow_exception_is_wrapped(interpreter, executor):
    def boom(**_):
        raise RuntimeError("boom")

    interpreter.register("Boom", boom)
    with pytest.raises(InterpreterError) as exc:
        executor.execute("Boom", config())
    assert isinstance(exc.value.__cause__, RuntimeError)


def test_run_metrics_are_recorded(executor):
    executor.execute("X", config({"A": 1}, outputs=["B"]))
    rows = [r for r in metrics.snapshot() if r["op"] == "run"]
    assert rows and rows[0]["target"] == "X" and rows[0]["count"] == 1


def test_events_are_logged_with_secret_inputs_redacted(executor, caplog):
    caplog.set_level(logging.INFO, logger="platform_monitoring")
    executor.execute("X", config({"A": 1, "api_key": "abc"}, outputs=["B"]))
    text = caplog.text
    assert "flow.run.start" in text
    assert "flow.run.success" in text
    assert "abc" not in text


def test_missing_required_output_logs_warning(interpreter, executor, caplog):
    interpreter.register("Empty", lambda **_: None)
    caplog.set_level(logging.INFO, logger="platform_monitoring")
    with pytest.raises(RequiredOutputError):
        executor.execute("Empty", config(required=["B"]))
    assert any(r.levelno == logging.WARNING and "flow.output.missing" in r.getMessage() for r in caplog.records)


def test_custom_executor_double_works_with_interpreter_protocol():
    class Session:
        def start(self):
            self.ran = True

        def get_variable(self, name):
            return {"out": "v"}.get(name)

    class Interp:
        def create_session(self, flow_name, inputs):
            return Session()

    assert InterpreterExecutor(Interp()).execute("F", config(outputs=["out", "x"])) == {"out": "v"}
