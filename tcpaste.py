#!/usr/bin/env python3
"""
tcpaste - push data over TCP, fetch it over HTTP

Two socket servers run side by side and share a single storage directory:
- Ingestion server (TCP): every accepted connection gets a fresh randomly
  named file and everything the client sends is appended to it until the
  client disconnects or goes idle
- Retrieval server (HTTP): answers a single GET per connection with either
  a listing of the stored files or the contents of one of them, guarded by
  an optional hidden path prefix and two-phase path traversal checks

Python Version: 3.8+
"""

import argparse
import codecs
import datetime
import html
import logging
import os
import queue
import random
import signal
import socket
import string
import sys
import threading
from pathlib import Path, PurePath
from typing import Dict, List, Optional, Tuple, Union


DEFAULT_HOST = "127.0.0.1"
DEFAULT_TCP_PORT = 8888
DEFAULT_HTTP_PORT = 80
DEFAULT_HIDDEN_PATH = "tcpaste"
DEFAULT_FILES_DIR = "files"
DEFAULT_LOG_DIR = "logs"
DEFAULT_TIMEOUT = 10.0

FILENAME_LENGTH = 10
FILENAME_ALPHABET = string.ascii_letters + string.digits
BUFFER_SIZE = 1024
LISTEN_BACKLOG = 50
ACCEPT_POLL_INTERVAL = 0.5

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(threadName)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

STATUS_MESSAGES = {
    200: "OK",
    400: "Bad Request",
    403: "Forbidden",
    404: "Not Found",
    500: "Internal Server Error",
}


def setup_logging(log_dir: Optional[str] = DEFAULT_LOG_DIR, level: int = logging.INFO) -> logging.Logger:
    """
    Configure the ``tcpaste`` logger with a console handler and, when
    ``log_dir`` is given, a file handler appending to ``<log_dir>/server.log``.

    Calling it again replaces the previously installed handlers.

    Args:
        log_dir: Directory for server.log, or None to log to stdout only
        level: Logging level for the logger and its handlers

    Returns:
        The configured ``tcpaste`` logger
    """
    logger = logging.getLogger("tcpaste")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(log_dir, "server.log"), mode='a'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Prevent duplicate logs
    logger.propagate = False
    return logger


def random_filename(length: int = FILENAME_LENGTH) -> str:
    """Return a random alphanumeric token. Collisions are not checked."""
    return ''.join(random.choices(FILENAME_ALPHABET, k=length))


def is_within(root: Union[str, PurePath], candidate: Union[str, PurePath]) -> bool:
    """
    Check whether ``candidate`` lies under ``root``, component by component.

    The comparison is textual only: nothing is resolved and the filesystem
    is never touched. Pass un-resolved paths for a cheap pre-filter and
    canonical paths for the authoritative containment check.

    Args:
        root: Directory that must contain the candidate
        candidate: Path to test

    Returns:
        True if every component of root is a leading component of candidate
    """
    root_parts = PurePath(root).parts
    candidate_parts = PurePath(candidate).parts
    return candidate_parts[:len(root_parts)] == root_parts


class PasteStore:
    """
    Flat directory of pasted files.

    All writes go through ``create`` and ``append`` which share one lock, so
    at most one write is in flight at any time across the whole process.
    Reads are not synchronized with writers.
    """

    def __init__(self, root: str = DEFAULT_FILES_DIR, name_length: int = FILENAME_LENGTH):
        self.root = os.path.abspath(root)
        self.name_length = name_length
        self.write_lock = threading.Lock()
        self.open_files = {}
        self.logger = logging.getLogger("tcpaste.store")

    def ensure_root(self):
        """Create the storage directory if it does not exist yet."""
        os.makedirs(self.root, exist_ok=True)
        self.logger.info(f"Ensured storage directory exists: {self.root}")

    def path_for(self, relative: str) -> str:
        return os.path.join(self.root, relative)

    def canonical_root(self) -> Path:
        return Path(self.root).resolve()

    def create(self) -> str:
        """
        Assign a new random name, create the file and keep an append handle
        open for it until ``close`` is called.

        Returns:
            The generated file name

        Raises:
            OSError: If the file cannot be created
        """
        name = random_filename(self.name_length)
        with self.write_lock:
            self.open_files[name] = open(self.path_for(name), 'ab')
        self.logger.debug(f"Created paste file: {name}")
        return name

    def append(self, name: str, data: bytes) -> int:
        """
        Append ``data`` to the named file while holding the write lock.

        Args:
            name: File name previously returned by ``create`` and not yet closed
            data: Bytes to append

        Returns:
            Number of bytes written
        """
        with self.write_lock:
            f = self.open_files[name]
            f.write(data)
            f.flush()
        return len(data)

    def close(self, name: str):
        """Close the append handle of a finished session. Unknown names are ignored."""
        with self.write_lock:
            f = self.open_files.pop(name, None)
            if f is not None:
                f.close()

    def list_names(self) -> List[str]:
        """Direct entries of the storage directory, in enumeration order."""
        return os.listdir(self.root)


class ConnectionServer:
    """
    Listening socket plus accept loop shared by the TCP and HTTP servers.

    With ``max_threads`` unset (or 0) every accepted connection runs in its
    own daemon thread. A positive ``max_threads`` starts a fixed pool of
    worker threads fed from a connection queue instead. Either way a failure
    inside one connection is logged and confined to that connection.
    """

    name = "server"

    def __init__(self, host: str, port: int, timeout: float = DEFAULT_TIMEOUT,
                 max_threads: Optional[int] = None):
        """
        Args:
            host: Address to bind
            port: Port to bind, 0 for an ephemeral port
            timeout: Idle read timeout applied to every client socket, in seconds
            max_threads: Worker pool size, None or 0 for one thread per connection
        """
        self.host = host
        self.port = port
        self.timeout = timeout
        self.max_threads = max_threads or 0
        self.server_socket = None
        self.running = False
        self.ready = threading.Event()
        self.stopped = threading.Event()
        self.thread_pool = []
        self.connection_queue = queue.Queue()
        self.connection_lock = threading.Lock()

        # Statistics tracking
        self.total_connections = 0
        self.active_connections = 0

        self.logger = logging.getLogger(f"tcpaste.{self.name}")

    def bind(self):
        """
        Create, bind and listen on the server socket.

        Raises:
            OSError: If the address cannot be bound
        """
        server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            server_socket.bind((self.host, self.port))
            server_socket.listen(LISTEN_BACKLOG)
        except OSError:
            server_socket.close()
            raise

        # Poll so that stop() is noticed even while no client connects
        server_socket.settimeout(ACCEPT_POLL_INTERVAL)
        self.server_socket = server_socket
        self.port = server_socket.getsockname()[1]
        self.logger.info(f"{self.name} server listening on {self.host}:{self.port}")

    def serve_forever(self):
        """
        Run the accept loop until ``stop`` is called.

        Returns immediately if the server was already stopped; a stopped
        server is never re-bound.
        """
        if self.stopped.is_set():
            self.logger.info(f"{self.name} server stopped before serving, not starting")
            # Release a socket bound after the stop
            self.stop()
            return
        if self.server_socket is None:
            self.bind()
        server_socket = self.server_socket
        self.running = True

        for i in range(self.max_threads):
            thread = threading.Thread(target=self._worker_thread, name=f"{self.name}-worker-{i + 1}")
            thread.daemon = True
            thread.start()
            self.thread_pool.append(thread)

        self.ready.set()
        try:
            while self.running and not self.stopped.is_set():
                try:
                    client_socket, client_address = server_socket.accept()
                except socket.timeout:
                    continue
                except OSError as e:
                    if self.running:
                        self.logger.error(f"Error accepting connection: {e}")
                    break

                with self.connection_lock:
                    self.total_connections += 1
                    self.active_connections += 1
                    connection_number = self.total_connections

                self.logger.info(f"New connection from {client_address[0]}:{client_address[1]}")

                if self.max_threads:
                    self.connection_queue.put((client_socket, client_address))
                else:
                    thread = threading.Thread(
                        target=self._run_connection,
                        args=(client_socket, client_address),
                        name=f"{self.name}-conn-{connection_number}",
                    )
                    thread.daemon = True
                    thread.start()
        finally:
            self.stop()

    def _worker_thread(self):
        """Worker thread that processes connections from the queue."""
        while self.running:
            try:
                client_socket, client_address = self.connection_queue.get(timeout=1.0)
            except queue.Empty:
                continue
            if self.stopped.is_set():
                self._drop_connection(client_socket, client_address)
            else:
                self._run_connection(client_socket, client_address)
            self.connection_queue.task_done()

    def _run_connection(self, client_socket: socket.socket, client_address: Tuple[str, int]):
        connection_id = f"{client_address[0]}:{client_address[1]}"
        try:
            client_socket.settimeout(self.timeout)
            self.handle_connection(client_socket, connection_id)
        except Exception:
            self.logger.exception(f"Error handling connection {connection_id}")
        finally:
            try:
                client_socket.close()
            except OSError:
                pass
            with self.connection_lock:
                self.active_connections -= 1
            self.logger.debug(f"Connection closed: {connection_id}")

    def handle_connection(self, client_socket: socket.socket, connection_id: str):
        raise NotImplementedError

    def stop(self):
        """
        Stop accepting connections. Connections in progress run to completion;
        connections still waiting in the worker queue are closed unserved.
        """
        self.stopped.set()
        self.running = False
        self._close_queued_connections()
        server_socket, self.server_socket = self.server_socket, None
        if server_socket is None:
            return
        try:
            server_socket.close()
        except OSError:
            pass
        with self.connection_lock:
            self.logger.info(f"{self.name} server stopped. Total connections: {self.total_connections}")

    def _close_queued_connections(self):
        while True:
            try:
                client_socket, client_address = self.connection_queue.get_nowait()
            except queue.Empty:
                return
            self._drop_connection(client_socket, client_address)
            self.connection_queue.task_done()

    def _drop_connection(self, client_socket: socket.socket, client_address: Tuple[str, int]):
        try:
            client_socket.close()
        except OSError:
            pass
        with self.connection_lock:
            self.active_connections -= 1
        self.logger.info(f"Dropped queued connection from {client_address[0]}:{client_address[1]}")


class IngestServer(ConnectionServer):
    """
    TCP sink: each connection's bytes are written to a new file.

    Nothing is ever sent back to the client. A session ends when the client
    closes the connection, stays idle for ``timeout`` seconds or the read
    fails; whatever was received up to that point stays on disk.
    """

    name = "ingest"

    def __init__(self, store: PasteStore, host: str = DEFAULT_HOST, port: int = DEFAULT_TCP_PORT,
                 timeout: float = DEFAULT_TIMEOUT, max_threads: Optional[int] = None):
        super().__init__(host, port, timeout, max_threads)
        self.store = store
        self.bytes_stored = 0

    def handle_connection(self, client_socket: socket.socket, connection_id: str):
        # The file exists before the first read, even if no data ever arrives
        filename = self.store.create()
        try:
            self.logger.info(f"Session {connection_id} writing to {filename}")

            decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
            written = 0

            while True:
                try:
                    chunk = client_socket.recv(BUFFER_SIZE)
                except socket.timeout:
                    self.logger.info(f"Connection timed out, closing stream: {connection_id}")
                    break
                except OSError as e:
                    self.logger.warning(f"Error reading stream from {connection_id}: {e}")
                    break

                if not chunk:
                    self.logger.info(f"Client closed the connection: {connection_id}")
                    break

                written += self._store_text(filename, decoder.decode(chunk))

            # Flush a trailing incomplete sequence as a replacement character
            written += self._store_text(filename, decoder.decode(b'', final=True))
            self.logger.info(f"Wrote {written} bytes to {filename}")
        finally:
            self.store.close(filename)

    def _store_text(self, filename: str, text: str) -> int:
        if not text:
            return 0
        written = self.store.append(filename, text.encode('utf-8'))
        with self.connection_lock:
            self.bytes_stored += written
        return written


class RetrievalServer(ConnectionServer):
    """
    Minimal HTTP/1.1 server exposing the storage directory.

    Reads a single buffer per connection, answers exactly one GET request
    and closes. Only the request line is looked at; headers and body are
    ignored.
    """

    name = "http"

    def __init__(self, store: PasteStore, host: str = DEFAULT_HOST, port: int = DEFAULT_HTTP_PORT,
                 hidden_path: Optional[str] = DEFAULT_HIDDEN_PATH, timeout: float = DEFAULT_TIMEOUT,
                 max_threads: Optional[int] = None):
        """
        Args:
            store: Storage directory to expose
            host: Address to bind
            port: Port to bind
            hidden_path: Path prefix required in every request, empty or None to disable
            timeout: Idle timeout for reading the request, in seconds
            max_threads: Worker pool size, None or 0 for one thread per connection
        """
        super().__init__(host, port, timeout, max_threads)
        self.store = store
        self.hidden_path = (hidden_path or "").strip('/')
        self.status_counts = {}

    def handle_connection(self, client_socket: socket.socket, connection_id: str):
        try:
            request_data = client_socket.recv(BUFFER_SIZE)
        except socket.timeout:
            self.logger.info(f"HTTP connection timed out: {connection_id}")
            return
        except OSError as e:
            self.logger.warning(f"Error reading HTTP stream from {connection_id}: {e}")
            return

        if not request_data:
            # Half-closed without a request line; still answered with 400 below
            self.logger.info(f"Client sent no request before closing its side: {connection_id}")

        response = self.build_response(request_data)
        self._send_response(client_socket, response)

        with self.connection_lock:
            code = response['status_code']
            self.status_counts[code] = self.status_counts.get(code, 0) + 1
        self.logger.info(f"{connection_id} -> {response['status_code']} {response['status_text']}")

    def build_response(self, request_data: bytes) -> Dict:
        """
        Turn raw request bytes into a response dictionary.

        Args:
            request_data: First chunk read from the client

        Returns:
            Response dictionary with status_code, status_text, headers and body
        """
        try:
            request = self._parse_request_line(request_data)
            if request is None:
                self.logger.warning("Invalid request line")
                return self._create_error_response(400, "Invalid request")
            return self._handle_get_request(request[1])
        except Exception:
            self.logger.exception("Error processing request")
            return self._create_error_response(500, "Internal Server Error")

    def _parse_request_line(self, request_data: bytes) -> Optional[Tuple[str, str]]:
        """
        Parse the request line into (method, target).

        Returns:
            The pair, or None unless the line has exactly three tokens and
            the method is GET
        """
        request_text = request_data.decode('utf-8', errors='replace')
        request_line = request_text.split('\n', 1)[0].split()
        if len(request_line) != 3 or request_line[0] != 'GET':
            return None
        return request_line[0], request_line[1]

    def _handle_get_request(self, target: str) -> Dict:
        path = target.lstrip('/')

        if self.hidden_path:
            if not path.startswith(self.hidden_path):
                return self._create_error_response(404, "Not Found")
            path = path[len(self.hidden_path):]

        relative_path = path.lstrip('/')

        # Cheap syntactic pre-filter; the check after resolution is the one that counts
        requested_path = self.store.path_for(relative_path)
        if '..' in requested_path or not is_within(self.store.root, requested_path):
            self.logger.warning(f"Security violation - rejected path: {target}")
            return self._create_error_response(400, "Invalid path specified.")

        if not relative_path:
            return self._list_directory()
        return self._serve_file(requested_path, target)

    def _list_directory(self) -> Dict:
        try:
            names = self.store.list_names()
        except OSError as e:
            self.logger.error(f"Unable to read storage directory {self.store.root}: {e}")
            return self._create_error_response(500, "Unable to read directory")

        prefix = f"/{html.escape(self.hidden_path)}" if self.hidden_path else ""
        links = []
        for name in names:
            display_name = html.escape(name)
            links.append(f'<a href="{prefix}/{display_name}">{display_name}</a><br>')
        body = ''.join(links).encode('utf-8', errors='replace')

        return {
            'status_code': 200,
            'status_text': 'OK',
            'headers': {
                'Content-Length': str(len(body)),
                'Content-Type': 'text/html',
                'Connection': 'close'
            },
            'body': body
        }

    def _serve_file(self, requested_path: str, target: str) -> Dict:
        """
        Resolve ``requested_path`` and return the file it points to.

        Args:
            requested_path: Storage root joined with the relative request path
            target: Original request target, for logging

        Returns:
            200 with the file contents, 403 if the resolved path escapes the
            storage root, 404 if it cannot be resolved or opened
        """
        try:
            canonical_path = Path(requested_path).resolve(strict=True)
        except (OSError, RuntimeError, ValueError):
            return self._create_error_response(404, "File not found")

        if not is_within(self.store.canonical_root(), canonical_path):
            self.logger.warning(f"Security violation - {target} resolves outside storage: {canonical_path}")
            return self._create_error_response(403, "Access Denied")

        try:
            with open(canonical_path, 'rb') as f:
                content = f.read()
        except OSError:
            return self._create_error_response(404, "File not found")

        return {
            'status_code': 200,
            'status_text': 'OK',
            'headers': {
                'Content-Length': str(len(content)),
                'Connection': 'close'
            },
            'body': content
        }

    def _create_error_response(self, status_code: int, message: str) -> Dict:
        body = message.encode('utf-8')
        return {
            'status_code': status_code,
            'status_text': STATUS_MESSAGES.get(status_code, "Unknown Error"),
            'headers': {
                'Content-Type': 'text/plain; charset=utf-8',
                'Content-Length': str(len(body)),
                'Connection': 'close'
            },
            'body': body
        }

    def _send_response(self, client_socket: socket.socket, response: Dict):
        """
        Send HTTP response to client.

        Args:
            client_socket: Client socket connection
            response: Response dictionary
        """
        status_line = f"HTTP/1.1 {response['status_code']} {response['status_text']}\r\n"
        now = datetime.datetime.now(datetime.timezone.utc)
        date_header = f"Date: {now.strftime('%a, %d %b %Y %H:%M:%S GMT')}\r\n"

        headers = ""
        for key, value in response['headers'].items():
            headers += f"{key}: {value}\r\n"

        head = (status_line + date_header + headers + "\r\n").encode('utf-8')
        try:
            client_socket.sendall(head + response.get('body', b''))
        except OSError as e:
            self.logger.error(f"Error sending response: {e}")


class TcpasteService:
    """Runs the ingestion and retrieval servers over one storage directory."""

    def __init__(self, host: str = DEFAULT_HOST, tcp_port: int = DEFAULT_TCP_PORT,
                 http_port: int = DEFAULT_HTTP_PORT, hidden_path: Optional[str] = DEFAULT_HIDDEN_PATH,
                 files_dir: str = DEFAULT_FILES_DIR, timeout: float = DEFAULT_TIMEOUT,
                 max_threads: Optional[int] = None):
        self.host = host
        self.store = PasteStore(files_dir)
        self.ingest_server = IngestServer(self.store, host, tcp_port, timeout, max_threads)
        self.http_server = RetrievalServer(self.store, host, http_port, hidden_path, timeout, max_threads)
        self.ingest_thread = None
        self.logger = logging.getLogger("tcpaste.service")

    def browse_url(self) -> str:
        hidden_path = self.http_server.hidden_path
        path = f"/{hidden_path}/" if hidden_path else "/"
        return f"http://{self.host}:{self.http_server.port}{path}"

    def start(self):
        """
        Bind both listeners, then serve: TCP in a background thread, HTTP in
        the calling thread. Returns once ``stop`` has been called.

        Raises:
            OSError: If the storage directory or either listener cannot be set up
        """
        self.store.ensure_root()
        self.ingest_server.bind()
        try:
            self.http_server.bind()
        except OSError:
            self.ingest_server.stop()
            raise

        self.logger.info(f"Files accessible at: {self.browse_url()}")

        self.ingest_thread = threading.Thread(target=self.ingest_server.serve_forever, name="ingest-accept")
        self.ingest_thread.daemon = True
        self.ingest_thread.start()

        try:
            self.http_server.serve_forever()
        finally:
            self.ingest_server.stop()

    def stop(self):
        self.logger.info("Stopping tcpaste...")
        self.http_server.stop()
        self.ingest_server.stop()

    def _signal_handler(self, signum, frame):
        """Handle shutdown signals gracefully."""
        self.logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        self.stop()


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Port must be an integer: {value!r}")
    if not (1 <= port <= 65535):
        raise argparse.ArgumentTypeError("Port must be between 1 and 65535")
    return port


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a number: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError("Value must be greater than 0")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not an integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError("Value must be at least 0")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tcpaste",
        description="Accept pastes over raw TCP and serve them over HTTP.",
        epilog="Example:\n  tcpaste --host 0.0.0.0 --tcp-port 9000 --http-port 8080 --hidden-path mysecret",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--host", default=DEFAULT_HOST,
                        help=f"IP address to bind (default: {DEFAULT_HOST})")
    parser.add_argument("--tcp-port", type=_port, default=DEFAULT_TCP_PORT,
                        help=f"Port for the TCP server (default: {DEFAULT_TCP_PORT})")
    parser.add_argument("--http-port", type=_port, default=DEFAULT_HTTP_PORT,
                        help=f"Port for the HTTP server (default: {DEFAULT_HTTP_PORT})")
    parser.add_argument("--hidden-path", default=DEFAULT_HIDDEN_PATH,
                        help=f"Hidden path prefix for HTTP access, empty to disable (default: {DEFAULT_HIDDEN_PATH})")
    parser.add_argument("--files-dir", default=DEFAULT_FILES_DIR,
                        help=f"Directory where pastes are stored (default: {DEFAULT_FILES_DIR})")
    parser.add_argument("--timeout", type=_positive_float, default=DEFAULT_TIMEOUT,
                        help=f"Idle timeout for client connections in seconds (default: {DEFAULT_TIMEOUT:g})")
    parser.add_argument("--max-threads", type=_non_negative_int, default=0,
                        help="Worker threads per server, 0 for one thread per connection (default: 0)")
    parser.add_argument("--log-dir", default=DEFAULT_LOG_DIR,
                        help=f"Directory for server.log, empty to log to stdout only (default: {DEFAULT_LOG_DIR})")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.
    Parses command line arguments and runs both servers until interrupted.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_dir or None, getattr(logging, args.log_level))

    service = TcpasteService(
        host=args.host,
        tcp_port=args.tcp_port,
        http_port=args.http_port,
        hidden_path=args.hidden_path,
        files_dir=args.files_dir,
        timeout=args.timeout,
        max_threads=args.max_threads,
    )

    signal.signal(signal.SIGINT, service._signal_handler)
    signal.signal(signal.SIGTERM, service._signal_handler)

    try:
        service.start()
    except OSError as e:
        print(f"Error starting server: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())


"""
===============================================================================
README - tcpaste
===============================================================================

## Running

```bash
# Defaults: TCP on 127.0.0.1:8888, HTTP on 127.0.0.1:80, prefix "tcpaste"
python tcpaste.py

# Custom addresses and prefix
python tcpaste.py --host 0.0.0.0 --tcp-port 9000 --http-port 8080 --hidden-path mysecret
```

Pastes are stored under `files/`, logs go to `logs/server.log` and stdout.

## Usage

```bash
# Paste
echo "hello world" | nc 127.0.0.1 9000

# Browse and fetch
curl http://127.0.0.1:8080/mysecret/
curl http://127.0.0.1:8080/mysecret/<name>
```

## Responses

- 200: listing (text/html) or file contents
- 400: malformed request line, non-GET method, or a path containing `..`
- 403: path resolves outside the storage directory (e.g. via a symlink)
- 404: prefix missing, file missing or unreadable
- 500: storage directory cannot be listed

## Known Limitations

- The hidden prefix is obscurity, not authentication
- Only the first 1024 bytes of an HTTP request are read
- Pasted bytes are stored as UTF-8; invalid sequences become U+FFFD
- No limit on concurrent connections or file size unless --max-threads is set
"""
