#!/usr/bin/env python3
"""
Convenience script to run the inspection API.

Usage:
    python run_server.py
    python run_server.py --port 8080
    python run_server.py --debug
"""

from web.app import app

if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Run Language N-gram Model Inspection API')
    parser.add_argument('--host', default='127.0.0.1', help='Host to bind to')
    parser.add_argument('--port', type=int, default=5000, help='Port to bind to')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')

    args = parser.parse_args()

    print(f"""
╔═══════════════════════════════════════════════════════╗
║     Language N-gram Model Inspection API              ║
╠═══════════════════════════════════════════════════════╣
║  Listening on http://{args.host}:{args.port}
╚═══════════════════════════════════════════════════════╝
    """)

    app.run(host=args.host, port=args.port, debug=args.debug, threaded=True)
