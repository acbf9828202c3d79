"""
Command-Line Interface for CostumeSwitch.

Usage:
    costumeswitch scan book.txt -n Alice -n Bob     # Subject of each passage
    costumeswitch scan book.epub -p profile.json    # Use a profile file
    costumeswitch scan - -n Alice --json            # Read stdin, JSON output
    costumeswitch quotes book.txt                   # Show quoted spans
    costumeswitch verbs --category action           # List verb vocabulary
    costumeswitch conjugate perk --particle up      # Inflect a verb
"""

import argparse
import json
import sys
from dataclasses import replace
from typing import Optional


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    from costumeswitch import __version__
    from costumeswitch.language.verbs import CATEGORY_KEYS, EDITION_KEYS, FORM_KEYS

    parser = argparse.ArgumentParser(
        prog="costumeswitch",
        description="Detect which character a passage of narrative text is about",
    )
    parser.add_argument("--version", action="version", version=f"costumeswitch {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # --- scan ---
    scan_parser = subparsers.add_parser("scan", help="Detect the subject of each passage")
    scan_parser.add_argument("source", help="Source file (EPUB, TXT, MD) or - for stdin")
    scan_parser.add_argument("-p", "--profile", help="Profile file (JSON)")
    scan_parser.add_argument("-n", "--name", action="append", default=[], help="Character name (repeatable)")
    scan_parser.add_argument("--json", action="store_true", help="Print results as JSON")
    scan_parser.add_argument("--summary", action="store_true", help="Print per-name totals")
    scan_parser.add_argument("--scan-dialogue", action="store_true", help="Detect attribution/action inside quotes")
    scan_parser.add_argument("--scan-quoted-names", action="store_true", help="Detect names inside quotes")
    scan_parser.add_argument("--last-subject", metavar="NAME", help="Subject before the first passage")

    # --- quotes ---
    quotes_parser = subparsers.add_parser("quotes", help="Show quoted spans")
    quotes_parser.add_argument("source", help="Source file or - for stdin")

    # --- verbs ---
    verbs_parser = subparsers.add_parser("verbs", help="List verb vocabulary")
    verbs_parser.add_argument("--category", choices=CATEGORY_KEYS, default="attribution")
    verbs_parser.add_argument("--edition", choices=EDITION_KEYS, default="default")
    verbs_parser.add_argument("--form", choices=(*FORM_KEYS, "legacy"), default="legacy")

    # --- conjugate ---
    conjugate_parser = subparsers.add_parser("conjugate", help="Show the forms of a verb")
    conjugate_parser.add_argument("lemma", help="Dictionary form")
    conjugate_parser.add_argument("--particle", default="", help="Particle (e.g. up, out)")

    return parser


def read_passages(source: str):
    """Passages from a file path, or from stdin when source is "-"."""
    from costumeswitch.parser import parse_source, split_passages

    if source == "-":
        return split_passages(sys.stdin.read(), source_file="<stdin>")
    _, passages = parse_source(source)
    return passages


def build_session(args):
    """DetectionSession from --profile / --name / scan flags."""
    from costumeswitch.config import load_profile_file
    from costumeswitch.models import Profile, ScanConfig
    from costumeswitch.session import DetectionSession

    if args.profile:
        profile, config = load_profile_file(args.profile)
    else:
        profile, config = Profile.from_dict({}), ScanConfig()

    if args.name:
        profile = replace(profile, patterns=profile.patterns + tuple(args.name))
    if args.scan_dialogue:
        config.scan_dialogue_actions = True
    if args.scan_quoted_names:
        config.scan_quoted_names = True

    session = DetectionSession(profile, config)
    if not session.matchers.effective_patterns:
        raise ValueError("No character names configured (use --name or --profile)")
    session.last_subject = args.last_subject
    return session


def cmd_scan(args) -> int:
    """Detect the subject of each passage."""
    from costumeswitch.report import summarize_detections

    try:
        session = build_session(args)
        passages = read_passages(args.source)

        results = []
        all_matches = []
        for passage in passages:
            result = session.scan(passage.text)
            results.append((passage, result))
            all_matches.extend(result.matches)

        if args.json:
            data = [
                {"index": p.index, "title": p.title, **r.to_dict()}
                for p, r in results
            ]
            print(json.dumps(data, indent=2, ensure_ascii=False))
            return 0

        for passage, result in results:
            if result.vetoed:
                label = "[vetoed]"
            elif result.best:
                label = f"{result.best.name} ({result.best.match_kind})"
            else:
                label = "-"
            preview = passage.text[:50].replace("\n", " ")
            print(f"  {passage.index + 1}. {label}: {preview}")

        if args.summary:
            print("\nSummary:\n")
            for summary in summarize_detections(all_matches):
                kinds = ", ".join(f"{k}={v}" for k, v in sorted(summary.kinds.items()))
                print(f"  {summary.name}: {summary.total} ({kinds})")

        return 0

    except Exception as e:
        print(f"Error: {e}")
        return 1


def cmd_quotes(args) -> int:
    """Show quoted spans."""
    from costumeswitch.detection.quotes import get_quote_ranges

    try:
        for passage in read_passages(args.source):
            for quote in get_quote_ranges(passage.text):
                span = passage.text[quote.start:quote.end + 1].replace("\n", " ")
                print(f"  {passage.index + 1}:{quote.start}-{quote.end} {span}")
        return 0

    except Exception as e:
        print(f"Error: {e}")
        return 1


def cmd_verbs(args) -> int:
    """List verb vocabulary."""
    from costumeswitch.language.catalog import build_legacy_verb_list, build_verb_slices

    try:
        if args.form == "legacy":
            verbs = build_legacy_verb_list(args.category, args.edition)
        else:
            verbs = build_verb_slices(args.category, args.edition)[args.form]
        for verb in verbs:
            print(verb)
        return 0

    except Exception as e:
        print(f"Error: {e}")
        return 1


def cmd_conjugate(args) -> int:
    """Show the forms of a verb."""
    from costumeswitch.language.verbs import conjugate

    try:
        forms = conjugate(args.lemma, args.particle)
        for key, value in forms.to_dict().items():
            print(f"  {key}: {value}")
        return 0

    except Exception as e:
        print(f"Error: {e}")
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "scan": cmd_scan,
        "quotes": cmd_quotes,
        "verbs": cmd_verbs,
        "conjugate": cmd_conjugate,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
