#!/usr/bin/env python3
"""SiteSmith - turns a website requirements report into a scaffolded GitHub repo.

Usage:
    python main.py build --report requirements.txt              # full pipeline
    python main.py build --text "Main purpose/goal: ..."        # report inline
    python main.py build --report requirements.txt --dry-run    # parse only
    python main.py send-report --to me@example.com --report requirements.txt
    python main.py list-stages
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from agents.email_sender import EmailSender
from core.errors import PipelineError
from core.orchestrator import Orchestrator


def _read_report(args):
    if getattr(args, "text", None):
        return args.text
    if args.report == "-":
        return sys.stdin.read()
    with open(args.report, encoding="utf-8") as f:
        return f.read()


def _print_identity(state):
    print(f"Project:   {state.project_name}")
    print(f"Category:  {state.business_type} ({state.industry})")
    print(f"Design:    {state.style}, {state.color_scheme} palette")
    info = state.extracted_info
    print(f"Purpose:   {info.purpose or 'Not specified'}")
    print(f"Audience:  {info.target_audience or 'Not specified'}")
    print(f"Objectives: {info.business_objectives or 'Not specified'}")


def cmd_build(args):
    """Run the full pipeline (or just the parse stage with --dry-run)."""
    report = _read_report(args)
    orchestrator = Orchestrator()

    if args.dry_run:
        state = orchestrator.parse(report)
        _print_identity(state)
        return 0

    state = orchestrator.run_full(report)
    _print_identity(state)
    print(f"\nRepository: {state.repository_url}")
    print(f"Status:     {state.status}")
    for result in state.stages:
        print(f"  [{result.stage}] {len(result.written)} written, {len(result.failed)} failed")
        for path in result.failed:
            print(f"      FAILED {path}")
    return 0


def cmd_send_report(args):
    report = _read_report(args)
    result = EmailSender().send(
        args.to, report, subject=args.subject, recipient_name=args.name,
    )
    if result["success"]:
        print(f"Email sent (id: {result['message_id']})")
        return 0
    print(f"Email failed: {result['error']}", file=sys.stderr)
    return 1


def cmd_list_stages(args):
    print("Pipeline stages:")
    for stage in Orchestrator().stages:
        print(f"  {stage.name:22s} - {stage.description}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="sitesmith",
        description="Requirements report to GitHub website pipeline",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    build_parser = subparsers.add_parser("build", help="Run the website build pipeline")
    source = build_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--report", help="Path to the requirements report ('-' for stdin)")
    source.add_argument("--text", help="Requirements report text")
    build_parser.add_argument("--dry-run", action="store_true",
                              help="Parse the report only, no GitHub calls")

    email_parser = subparsers.add_parser("send-report", help="Email a requirements report")
    email_parser.add_argument("--to", required=True, help="Recipient email address")
    email_parser.add_argument("--report", required=True, help="Path to the report ('-' for stdin)")
    email_parser.add_argument("--subject", help="Custom subject")
    email_parser.add_argument("--name", help="Recipient name for the greeting")

    subparsers.add_parser("list-stages", help="List pipeline stages")

    args = parser.parse_args(argv)

    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "build": cmd_build,
        "send-report": cmd_send_report,
        "list-stages": cmd_list_stages,
    }
    if args.command not in commands:
        parser.print_help()
        return 1

    try:
        return commands[args.command](args)
    except PipelineError as e:
        stage = f"[{e.stage}] " if e.stage else ""
        print(f"Pipeline failed: {stage}{e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
