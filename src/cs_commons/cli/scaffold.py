"""create-site and create-artifact commands."""

import argparse


def cmd_create_site(args: argparse.Namespace) -> int:
    from cs_commons.scaffold.site import create_site

    result = create_site(args.sitename, args.input, cwd=args.cwd)
    print(f"\n  Created site: {result['target']}")
    print(f"  Website: {result['metadata'].get('url', '')}")
    print(f"  Next: cd {args.sitename} && cs-commons preview, then cs-commons checkin")
    return 0


def cmd_create_artifact(args: argparse.Namespace) -> int:
    from cs_commons.scaffold.artifact import create_artifact

    result = create_artifact(args.name, args.input, cwd=args.cwd)
    metadata = result["metadata"]
    print(f"\n  Created artifact: {result['target']}")
    print(f"  Title:   {metadata['title']}")
    print(f"  License: {metadata['license']['shortname']}")
    print(f"  Next: add content, then run 'cs-commons checkin' inside {args.name}")
    return 0
