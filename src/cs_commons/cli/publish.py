"""checkin, import-artifact, update-artifact and preview commands."""

import argparse


def cmd_checkin(args: argparse.Namespace) -> int:
    from cs_commons.git.checkin import checkin

    result = checkin(args.cwd, args.input)
    print(f"\n  Pushed {len(result.files)} file(s) to {result.remote} ({result.branch})")
    return 0


def cmd_import_artifact(args: argparse.Namespace) -> int:
    from cs_commons.git.submodule import import_artifact

    target = import_artifact(args.repo_url, args.local_path, cwd=args.cwd)
    print(f"\n  Imported {args.repo_url} into {target}")
    print("  Commit and push the new submodule to publish it:")
    print(f"    git commit -m 'Import {args.local_path}' && git push")
    return 0


def cmd_update_artifact(args: argparse.Namespace) -> int:
    print(f"  update-artifact is not implemented yet ({args.local_path} left unchanged).")
    return 1


def cmd_preview(args: argparse.Namespace) -> int:
    from cs_commons.errors import ValidationFailure
    from cs_commons.metadata.store import detect_kind
    from cs_commons.process import run_verbose

    if detect_kind(args.cwd) != "site":
        raise ValidationFailure("preview only works inside a cs-commons site")

    print("  Starting the preview server; press Ctrl-C to stop.")
    try:
        run_verbose(["jekyll", "serve", "--watch"], cwd=args.cwd)
    except KeyboardInterrupt:
        print("\n  Preview stopped.")
    return 0
