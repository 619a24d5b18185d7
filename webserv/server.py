"""Listening sockets that answer HTTP requests, and the server that drives them."""

from __future__ import annotations

import argparse
import logging
import selectors
import socket
import sys
from pathlib import Path
from typing import Iterable

from .request import Request
from .status import DEFAULT_PORT
from .tools import RED, RESET, FatalError

logger = logging.getLogger(__name__)

_RECV_SIZE = 0xFFFF - 1
_POLL_TIMEOUT = 0.1
_MAIN_PORTS = (8080, 8081, 8082, 2)


class Listener:
    """A listening socket on one port together with the clients it accepted."""

    def __init__(
        self,
        port: int = DEFAULT_PORT,
        root: str | Path = ".",
        host: str = "",
    ) -> None:
        self.root = Path(root)
        self._clients: dict[int, socket.socket] = {}
        self._closed = False
        try:
            self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise FatalError(f"socket: {exc}") from exc

        stage = "setsockopt"
        try:
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            stage = "bind"
            self._sock.bind((host, port))
            stage = "listen"
            self._sock.listen(socket.SOMAXCONN)
        except OSError as exc:
            self._sock.close()
            raise FatalError(f"{stage}: {exc}") from exc

        self._selector = selectors.DefaultSelector()
        self._selector.register(self._sock, selectors.EVENT_READ)

    def __enter__(self) -> Listener:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fileno(self) -> int:
        """Return the descriptor of the listening socket (-1 once closed)."""
        return self._sock.fileno()

    def address(self) -> tuple[str, int]:
        """Return the ``(host, port)`` the socket is bound to."""
        try:
            name = self._sock.getsockname()
        except OSError as exc:
            raise FatalError(f"getsockname: {exc}") from exc
        return name[0], name[1]

    def run(self, timeout: float = _POLL_TIMEOUT) -> None:
        """Wait up to ``timeout`` seconds and handle whatever became readable."""
        try:
            events = self._selector.select(timeout)
        except OSError as exc:
            raise FatalError(f"poll: {exc}") from exc
        for key, _ in events:
            if key.fileobj is self._sock:
                self._accept()
            else:
                self._serve(key.fileobj)

    def _accept(self) -> None:
        try:
            conn, _ = self._sock.accept()
        except OSError as exc:
            raise FatalError(f"accept: {exc}") from exc
        self._clients[conn.fileno()] = conn
        self._selector.register(conn, selectors.EVENT_READ)

    def _drop(self, conn: socket.socket) -> None:
        self._clients.pop(conn.fileno(), None)
        self._selector.unregister(conn)
        conn.close()

    def _serve(self, conn: socket.socket) -> None:
        try:
            data = conn.recv(_RECV_SIZE)
        except OSError:
            return
        if not data:
            self._drop(conn)
            return
        logger.debug("%s[DEBUG] :%s\n%s", RED, RESET, data.decode("utf-8", errors="replace"))
        try:
            local = conn.getsockname()
        except OSError as exc:
            raise FatalError(f"getsockname: {exc}") from exc
        response = Request(data, (local[0], local[1]), self.root)
        try:
            conn.sendall(response.to_bytes())
        except OSError:
            return

    def close(self) -> None:
        """Close every client connection and the listening socket."""
        if self._closed:
            return
        self._closed = True
        for conn in list(self._clients.values()):
            self._drop(conn)
        self._selector.unregister(self._sock)
        self._selector.close()
        self._sock.close()


class Server:
    """A group of listeners served in turn."""

    def __init__(
        self,
        ports: Iterable[int] = (DEFAULT_PORT,),
        root: str | Path = ".",
        host: str = "",
    ) -> None:
        self.listeners: list[Listener] = []
        try:
            for port in ports:
                self.listeners.append(Listener(port, root, host))
        except FatalError:
            self.close()
            raise

    def __enter__(self) -> Server:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def run_once(self, timeout: float = _POLL_TIMEOUT) -> None:
        """Give every listener one turn."""
        for listener in self.listeners:
            listener.run(timeout)

    def serve_forever(self) -> None:
        """Serve until interrupted."""
        while True:
            self.run_once()

    def close(self) -> None:
        """Close every listener."""
        for listener in self.listeners:
            listener.close()


def main(argv: list[str] | None = None) -> int:
    """Start the server on the given ports and serve until interrupted."""
    parser = argparse.ArgumentParser(prog="webserv", description="Serve files over HTTP.")
    parser.add_argument("ports", nargs="*", type=int, default=list(_MAIN_PORTS))
    parser.add_argument("--root", default=".", help="directory files are served from")
    parser.add_argument("--host", default="", help="address to bind to")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG, format="%(message)s")
    try:
        with Server(args.ports, args.root, args.host) as server:
            server.serve_forever()
    except FatalError as exc:
        print(f"webserv: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())