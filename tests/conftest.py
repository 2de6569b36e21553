import os
import pytest

# Tests must never reach a real org or database, whatever the local .env says.
# Set before flowproc is imported: settings are read at import time.
os.environ['FLOWPROC_INTERPRETER'] = 'memory'
os.environ['FLOWPROC_STORE'] = 'memory'
os.environ.pop('FLOWPROC_READ_TABLES', None)

from flowproc import metrics  # noqa: E402
from flowproc.executor import InterpreterExecutor  # noqa: E402
from flowproc.interpreter.in_memory import InMemoryInterpreter  # noqa: E402
from flowproc.store.adapters.in_memory_adapter import InMemoryConfigStore  # noqa: E402
from flowproc.store.service import ConfigStoreService  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_metrics():
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture()
def interpreter():
    interp = InMemoryInterpreter()
    interp.register("X", lambda A=None, **_: {"B": A + 1} if A is not None else {})
    return interp


@pytest.fixture()
def executor(interpreter):
    return InterpreterExecutor(interpreter)


@pytest.fixture()
def config_rows():
    return InMemoryConfigStore({
        "flow_settings": [
            {"developer_name": "Case_Intake", "flow_name": "X", "label": "Case intake"},
            {"developer_name": "Dup", "flow_name": "Y"},
            {"developer_name": "Dup", "flow_name": "Z"},
            {"developer_name": "Blank", "flow_name": ""},
        ]
    })


@pytest.fixture()
def store(config_rows):
    return ConfigStoreService(config_rows)
