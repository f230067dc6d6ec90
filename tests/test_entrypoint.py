import pytest

from todo_server import __main__ as entrypoint


class TestEntrypoint:
    def test_bind_failure_is_printed_and_exits(self, monkeypatch, capsys):
        def refuse(address):
            raise OSError("address in use")

        monkeypatch.setattr(entrypoint.socket, "create_server", refuse)
        with pytest.raises(SystemExit) as excinfo:
            entrypoint.main()
        assert excinfo.value.code == 1
        assert "address in use" in capsys.readouterr().out

    def test_serves_on_bound_socket(self, monkeypatch):
        bound = object()
        served = {}

        class FakeServer:
            def __init__(self, config):
                served["config"] = config

            def run(self, sockets=None):
                served["sockets"] = sockets

        monkeypatch.setenv("TODO_PORT", "6001")

        def bind(address):
            served["address"] = address
            return bound

        monkeypatch.setattr(entrypoint.socket, "create_server", bind)
        monkeypatch.setattr(entrypoint.uvicorn, "Server", FakeServer)
        entrypoint.main()
        assert served["address"] == ("localhost", 6001)
        assert served["sockets"] == [bound]
        assert served["config"].app.state.store is not None
