from typing import Any, Dict, Protocol
import logging
import time

import platform_monitoring

from flowproc import metrics
from flowproc.exceptions import FlowProcessError, InterpreterError, RequiredOutputError
from flowproc.interpreter.interface import FlowInterpreter
from flowproc.models import ProcessConfig

logger = logging.getLogger(__name__)


class FlowExecutor(Protocol):
    """Runs a resolved flow and collects its declared outputs."""

    def execute(self, flow_name: str, config: ProcessConfig) -> Dict[str, Any]:
        ...


class InterpreterExecutor:
    """Executor backed by a FlowInterpreter.

    Creates a session with the configured inputs, starts it synchronously,
    then reads every declared output. Missing optional outputs are left out
    of the result; missing required outputs fail the whole run.
    """

    def __init__(self, interpreter: FlowInterpreter):
        self.interpreter = interpreter

    def execute(self, flow_name: str, config: ProcessConfig) -> Dict[str, Any]:
        start = time.time()
        platform_monitoring.log_event(
            "flow.run.start",
            {"flow": flow_name, "inputs": dict(config.inputs), "outputs": sorted(config.outputs)},
        )
        try:
            session = self.interpreter.create_session(flow_name, dict(config.inputs))
            session.start()

            result: Dict[str, Any] = {}
            missing = []
            for name in sorted(config.outputs):
                value = session.get_variable(name)
                if value is not None:
                    result[name] = value
                elif config.is_required(name):
                    missing.append(name)
                else:
                    logger.debug("flow %s produced no value for optional output %s", flow_name, name)
            if missing:
                platform_monitoring.log_event(
                    "flow.output.missing", {"flow": flow_name, "missing": missing}, level=logging.WARNING
                )
                raise RequiredOutputError(flow_name, missing)
        except FlowProcessError as e:
            platform_monitoring.log_event(
                "flow.run.error", {"flow": flow_name, "error": str(e)}, level=logging.ERROR
            )
            raise
        except Exception as e:
            platform_monitoring.log_event(
                "flow.run.error", {"flow": flow_name, "error": str(e)}, level=logging.ERROR
            )
            raise InterpreterError(f"Flow '{flow_name}' raised {type(e).__name__}: {e}") from e
        finally:
            metrics.inc("run", flow_name)
            metrics.observe("run", flow_name, (time.time() - start) * 1000.0)

        platform_monitoring.log_event("flow.run.success", {"flow": flow_name, "outputs": sorted(result)})
        return result


__all__ = ["FlowExecutor", "InterpreterExecutor"]
