import argparse
import logging
import os
import signal
import sys

from miniftp.entities.ftp_server import start_connection_listener


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Minimal FTP server (RFC 959 section 5.1)")
    parser.add_argument("--host", default=os.getenv("MINIFTP_HOST", "0.0.0.0"), help="Interfaz de escucha")
    parser.add_argument("--port", type=int, default=int(os.getenv("MINIFTP_PORT", "8000")), help="Puerto de la conexión de control")
    parser.add_argument("--root", default=os.getenv("MINIFTP_ROOT", os.getcwd()), help="Directorio raíz servido")
    parser.add_argument("--log-level", default=os.getenv("MINIFTP_LOG_LEVEL", "INFO"), help="Nivel de logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s %(levelname)s %(message)s')

    def _handle_sigint(signum, frame):
        print('\nShutting down listener')
        sys.exit(0)

    signal.signal(signal.SIGINT, _handle_sigint)

    start_connection_listener(host=args.host, port=args.port, root_directory=args.root)


if __name__ == "__main__":
    main()
