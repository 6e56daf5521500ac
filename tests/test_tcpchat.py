import io
import socket
import threading
import time

import pytest

from procwatch import tcpchat


def test_greeting_ends_with_marker_line():
    text = tcpchat.greeting(0.0)
    assert text.endswith("\nITER.\n")
    assert text.count("\n") == 2


def test_greeting_first_line_is_local_time():
    now = 1_000_000_000.0
    first = tcpchat.greeting(now).split("\n")[0]
    parsed = time.strptime(first, "%a %b %d %H:%M:%S %Y")
    expected = time.localtime(now)
    assert parsed[:6] == expected[:6]


def _listener():
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    return listener


def test_serve_greets_and_answers_from_stdin():
    listener = _listener()
    port = listener.getsockname()[1]
    server_out = io.StringIO()
    seen = {}

    def client():
        with socket.create_connection(("127.0.0.1", port), timeout=5) as sock:
            data = b""
            while not data.endswith(b"ITER.\n"):
                chunk = sock.recv(1024)
                if not chunk:
                    break
                data += chunk
            seen["greeting"] = data
            sock.sendall(b"hi")
            seen["reply"] = sock.recv(1024)

    thread = threading.Thread(target=client)
    thread.start()
    with listener:
        count = tcpchat.serve(listener, io.StringIO("hello back\n"), server_out)
    thread.join(timeout=5)

    assert count == 1
    assert seen["greeting"].endswith(b"ITER.\n")
    assert seen["reply"] == b"hello back"
    text = server_out.getvalue()
    assert "From client: hi" in text
    assert text.endswith("Client disconnected or read error.\n")


def test_serve_stops_when_stdin_is_exhausted():
    listener = _listener()
    port = listener.getsockname()[1]
    seen = {}

    def client():
        with socket.create_connection(("127.0.0.1", port), timeout=5) as sock:
            sock.sendall(b"ping")
            received = b""
            while True:
                chunk = sock.recv(1024)
                if not chunk:
                    break
                received += chunk
            seen["received"] = received

    thread = threading.Thread(target=client)
    thread.start()
    with listener:
        count = tcpchat.serve(listener, io.StringIO(""), io.StringIO())
    thread.join(timeout=5)
    assert count == 1
    assert seen["received"].endswith(b"ITER.\n")


def _upper_peer(sock, rounds):
    with sock:
        for _ in range(rounds):
            data = sock.recv(1024)
            if not data:
                return
            sock.sendall(data.upper())


def test_chat_collects_replies():
    ours, theirs = socket.socketpair()
    peer = threading.Thread(target=_upper_peer, args=(theirs, 2))
    peer.start()
    out = io.StringIO()
    with ours:
        replies = tcpchat.chat(ours, io.StringIO("abc\nxyz\n"), out)
    peer.join(timeout=5)
    assert replies == ["ABC", "XYZ"]
    assert "Server: ABC\n" in out.getvalue()
    assert "Server: XYZ\n" in out.getvalue()


def test_client_main_requires_two_arguments():
    assert tcpchat.client_main(["127.0.0.1"]) == 1


def test_client_main_reports_failed_connection(capsys):
    listener = _listener()
    port = listener.getsockname()[1]
    listener.close()
    assert tcpchat.client_main(["127.0.0.1", str(port)]) == 1
    assert "Connection failed" in capsys.readouterr().err


@pytest.mark.parametrize("port", ["notaport"])
def test_client_main_rejects_bad_port(port):
    assert tcpchat.client_main(["127.0.0.1", port]) == 1