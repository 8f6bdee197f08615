from __future__ import annotations

import argparse
import io
from pathlib import Path

import httpx
import pytest

from blog.app import create_app
from blog.cli import EXIT_CLIENT_ERROR, EXIT_OK, EXIT_SERVER_ERROR, build_parser, main
from blog.client import BlogClient, FileSessionStore, HttpTransport, TransportUnavailableError
from blog.container import Container


@pytest.fixture()
def run_cli(container: Container, tmp_path: Path):
    app = create_app(container=container)
    token_file = tmp_path / "token"

    def factory(args: argparse.Namespace) -> BlogClient:
        http_client = httpx.Client(transport=httpx.WSGITransport(app=app), base_url="http://testserver")
        store = FileSessionStore(args.token_file or token_file)
        return BlogClient(HttpTransport("http://testserver", http_client=http_client), store)

    def run(*argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        code = main(list(argv), client_factory=factory, out=out, err=err)
        return code, out.getvalue(), err.getvalue()

    run.token_file = token_file  # type: ignore[attr-defined]
    return run


def test_register_logs_in_and_saves_token(run_cli) -> None:
    code, out, err = run_cli("register", "-u", "alice", "-e", "alice@example.com", "-p", "pw")

    assert code == EXIT_OK
    assert "Registered alice" in out
    assert err == ""
    assert run_cli.token_file.read_text(encoding="utf-8")


def test_full_session(run_cli) -> None:
    run_cli("register", "-u", "alice", "-e", "alice@example.com", "-p", "pw")

    code, out, _ = run_cli("create", "-t", "Hello", "-c", "World")
    assert code == EXIT_OK
    assert "#1 Hello" in out

    code, out, _ = run_cli("update", "-i", "1", "-t", "Hi")
    assert code == EXIT_OK
    assert "#1 Hi" in out

    code, out, _ = run_cli("list")
    assert "of 1" in out

    code, out, _ = run_cli("status")
    assert "Logged in as alice" in out

    code, out, _ = run_cli("delete", "-i", "1")
    assert code == EXIT_OK

    code, _, err = run_cli("get", "-i", "1")
    assert code == EXIT_CLIENT_ERROR
    assert err.startswith("error: not_found: ")


def test_logout_then_protected_command_fails(run_cli) -> None:
    run_cli("register", "-u", "alice", "-e", "alice@example.com", "-p", "pw")

    code, out, _ = run_cli("logout")
    assert code == EXIT_OK
    assert not run_cli.token_file.exists()

    code, _, err = run_cli("create", "-t", "T", "-c", "C")
    assert code == EXIT_CLIENT_ERROR
    assert err.startswith("error: unauthenticated: ")


def test_wrong_password_reports_kind(run_cli) -> None:
    run_cli("register", "-u", "alice", "-e", "alice@example.com", "-p", "pw")

    code, _, err = run_cli("login", "-u", "alice", "-p", "nope")

    assert code == EXIT_CLIENT_ERROR
    assert err.strip() == "error: invalid_credentials: Invalid username or password"


def test_transport_failure_exits_with_two() -> None:
    class Unreachable:
        def list_posts(self, limit: int, offset: int):
            raise TransportUnavailableError("Cannot reach server")

        def close(self) -> None:
            pass

    err = io.StringIO()
    code = main(["list"], client_factory=lambda args: BlogClient(Unreachable()), out=io.StringIO(), err=err)

    assert code == EXIT_SERVER_ERROR
    assert err.getvalue().startswith("error: internal: ")


def test_garbled_server_response_exits_with_two() -> None:
    def factory(args: argparse.Namespace) -> BlogClient:
        http_client = httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text="not json")),
            base_url="http://blog.invalid",
        )
        return BlogClient(HttpTransport("http://blog.invalid", http_client=http_client))

    err = io.StringIO()
    code = main(["get", "-i", "1"], client_factory=factory, out=io.StringIO(), err=err)

    assert code == EXIT_SERVER_ERROR
    assert err.getvalue().startswith("error: internal: Unexpected response from server")


def test_parser_global_flags() -> None:
    args = build_parser().parse_args(["--grpc", "--server", "localhost:50051", "--token-file", "/tmp/t", "status"])

    assert args.grpc is True
    assert args.server == "localhost:50051"
    assert args.token_file == "/tmp/t"
    assert args.command == "status"
