"""
CLI Module

Architectural Intent:
- Command-line interface for Vigil
- Entry point for the daemon and one-shot alert tooling
- Delegates to application use cases via composition root
- Supports --verbose/--debug flags for log level control
"""

import argparse
import asyncio
import json
import logging
import sys
import traceback

from vigil.domain.errors import VigilError
from vigil.domain.services.alert_aggregator import summarize
from vigil.infrastructure.logging import configure_logging
from vigil.presentation.web.app import decode_messages

TELEMETRY_FLUSH_INTERVAL = 60


def _read_alerts(path: str):
    with open(path, "rb") as f:
        return decode_messages(f.read())


async def _serve(container, host: str, port: int) -> None:
    from vigil.presentation.web.app import VigilWebApp

    await container.telemetry.initialize()
    container.dispatcher.start()
    app = VigilWebApp(gate=container.gate, notify_alerts=container.notify_alerts)
    await app.start(host, port)
    print(f"[*] Vigil running on http://{host}:{app.port}. Press Ctrl+C to stop.")
    try:
        while True:
            await asyncio.sleep(TELEMETRY_FLUSH_INTERVAL)
            await container.telemetry.export()
    finally:
        app.stop()
        await container.dispatcher.stop()


async def async_main():
    parser = argparse.ArgumentParser(
        description="Vigil: cluster event handler and alert notifier"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit structured JSON logs"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    start_parser = subparsers.add_parser(
        "start", help="Run the event dispatcher and HTTP transport"
    )
    start_parser.add_argument(
        "--config", "-c", default=None, help="Path to vigil.json"
    )
    start_parser.add_argument("--host", default=None, help="Listen address")
    start_parser.add_argument(
        "--port", "-p", type=int, default=None, help="Listen port"
    )

    notify_parser = subparsers.add_parser(
        "notify", help="Send one alert batch through the enabled notifiers"
    )
    notify_parser.add_argument(
        "--alerts", "-a", required=True, help="JSON file with an array of alerts"
    )
    notify_parser.add_argument(
        "--config", "-c", default=None, help="Path to vigil.json"
    )

    render_parser = subparsers.add_parser(
        "render", help="Print the rendered notification for an alert batch"
    )
    render_parser.add_argument(
        "--alerts", "-a", required=True, help="JSON file with an array of alerts"
    )
    render_parser.add_argument("--template", "-t", help="Template override path")
    render_parser.add_argument("--cluster", default="Consul", help="Cluster name")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    # Configure logging based on flags
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    configure_logging(level=level, json_format=args.json_logs)

    verbose = args.verbose or args.debug

    if args.command == "render":
        from vigil.infrastructure.rendering.notification_renderer import (
            NotificationRenderer,
            template_source_for,
        )

        try:
            summary = summarize(_read_alerts(args.alerts))
            renderer = NotificationRenderer(template_source_for(args.template))
            body = renderer.render(summary, args.cluster)
        except (OSError, VigilError) as e:
            print(f"[-] Render failed: {e}")
            if verbose:
                traceback.print_exc()
            sys.exit(1)
        print(body.decode("utf-8"))
        return

    from vigil.composition_root import create_container

    try:
        container = create_container(args.config)
    except VigilError as e:
        print(f"[-] Invalid configuration: {e}")
        sys.exit(1)

    if not verbose:
        # Without CLI flags the configured log_level applies
        config_level = container.config_provider.config.log_level.upper()
        configure_logging(
            level=getattr(logging, config_level, logging.INFO),
            json_format=args.json_logs,
        )

    if args.command == "notify":
        try:
            messages = _read_alerts(args.alerts)
        except (OSError, VigilError) as e:
            print(f"[-] Unable to read alerts: {e}")
            sys.exit(1)

        results = await container.notify_alerts.execute(messages)
        print(json.dumps(results, indent=2))
        if results and not any(results.values()):
            print("[-] No notifier succeeded.")
            sys.exit(1)
        return

    if args.command == "start":
        web = container.config_provider.config.web
        try:
            await _serve(container, args.host or web.host, args.port or web.port)
        except OSError as e:
            print(f"[-] Unable to start: {e}")
            if verbose:
                traceback.print_exc()
            sys.exit(1)
        return


def main():
    try:
        asyncio.run(async_main())
    except KeyboardInterrupt:
        print("\n[*] Vigil stopped.")


if __name__ == "__main__":
    main()
