import pytest

from flowproc.config import settings
from flowproc.executor import InterpreterExecutor
from flowproc.factory import build_executor, build_interpreter, build_store, create_flow_process
from flowproc.interpreter.in_memory import InMemoryInterpreter
from flowproc.interpreter.salesforce import SalesforceFlowInterpreter
from flowproc.store.adapters.in_memory_adapter import InMemoryConfigStore
from flowproc.store.service import ConfigStoreService


def test_memory_backends():
    assert isinstance(build_interpreter("memory"), InMemoryInterpreter)
    store = build_store("memory")
    assert isinstance(store, ConfigStoreService)
    assert isinstance(store.adapter, InMemoryConfigStore)


def test_unknown_kinds_raise():
    with pytest.raises(ValueError):
        build_interpreter("bogus")
    with pytest.raises(ValueError):
        build_store("bogus")


def test_salesforce_requires_credentials(monkeypatch):
    monkeypatch.setattr(settings, "SF_INSTANCE_URL", None)
    monkeypatch.setattr(settings, "SF_ACCESS_TOKEN", None)
    with pytest.raises(RuntimeError):
        build_interpreter("salesforce")


def test_salesforce_built_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "SF_INSTANCE_URL", "https://acme.my.salesforce.com")
    monkeypatch.setattr(settings, "SF_ACCESS_TOKEN", "tok")
    monkeypatch.setattr(settings, "SF_API_VERSION", "61.0")
    interp = build_interpreter("salesforce")
    assert isinstance(interp, SalesforceFlowInterpreter)
    assert interp.flow_url("F").endswith("/services/data/v61.0/actions/custom/flow/F")


def test_supabase_requires_credentials(monkeypatch):
    monkeypatch.setattr(settings, "SUPABASE_URL", None)
    monkeypatch.setattr(settings, "SUPABASE_KEY", None)
    with pytest.raises(RuntimeError):
        build_store("supabase")


def test_store_picks_up_read_allowlist(monkeypatch):
    monkeypatch.setenv("FLOWPROC_READ_TABLES", "flow_settings, routing")
    assert build_store("memory").read_allowlist == {"flow_settings", "routing"}


def test_build_executor_wraps_given_interpreter():
    interp = InMemoryInterpreter()
    ex = build_executor(interpreter=interp)
    assert isinstance(ex, InterpreterExecutor)
    assert ex.interpreter is interp


def test_create_flow_process_end_to_end():
    interp = InMemoryInterpreter({"Greet": lambda name: {"greeting": f"hi {name}"}})
    rows = InMemoryConfigStore({"flow_settings": [{"developer_name": "Greeter", "flow_name": "Greet"}]})
    proc = create_flow_process(interpreter=interp, store=rows)
    assert proc.from_config("Greeter").with_input("name", "ada").returning("greeting") == "hi ada"


def test_default_executor_comes_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "FLOWPROC_INTERPRETER", "memory")
    from flowproc.process import FlowProcess

    assert isinstance(FlowProcess().executor.interpreter, InMemoryInterpreter)


def test_validate_keys_reports_missing_credentials(monkeypatch):
    monkeypatch.setattr(settings, "FLOWPROC_INTERPRETER", "salesforce")
    monkeypatch.setattr(settings, "FLOWPROC_STORE", "memory")
    monkeypatch.setattr(settings, "SF_INSTANCE_URL", None)
    monkeypatch.setattr(settings, "SF_ACCESS_TOKEN", "tok")
    assert settings.validate_keys() == ["SF_INSTANCE_URL"]
    with pytest.raises(EnvironmentError):
        settings.validate_keys(raise_on_missing=True)
