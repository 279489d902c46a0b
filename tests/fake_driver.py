"""Stand-in webdriver executable used by the launcher tests.

Behaviour is selected with FAKE_DRIVER_MODE:
  listen  accept connections on the --port given (default)
  exit    write to stderr and exit with code 3
  hang    never listen
FAKE_DRIVER_CHATTY=N writes N lines to stdout before listening.
"""
import os
import socket
import sys
import time


def parse_port(argv):
    for index, arg in enumerate(argv):
        if arg.startswith("--port="):
            return int(arg.split("=", 1)[1])
        if arg == "--port":
            return int(argv[index + 1])
    raise SystemExit("no --port given")


def main():
    argv_file = os.environ.get("FAKE_DRIVER_ARGV_FILE")
    if argv_file:
        with open(argv_file, "w", encoding="utf-8") as f:
            f.write("\n".join(sys.argv[1:]))

    mode = os.environ.get("FAKE_DRIVER_MODE", "listen")
    if mode == "exit":
        sys.stderr.write("fake driver refused to start\n")
        sys.exit(3)
    if mode == "hang":
        time.sleep(60)
        return

    for index in range(int(os.environ.get("FAKE_DRIVER_CHATTY", "0"))):
        sys.stdout.write(f"log line {index:06d} " + "x" * 80 + "\n")
    sys.stdout.flush()

    port = parse_port(sys.argv[1:])
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind(("127.0.0.1", port))
        server.listen()
        while True:
            conn, _ = server.accept()
            conn.close()


if __name__ == "__main__":
    main()
