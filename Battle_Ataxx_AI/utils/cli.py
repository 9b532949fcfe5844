"""CLI options for selecting players, search depth, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Battle Ataxx AI")
    parser.add_argument("--depth", type=int, help="Search depth for AI players (default from settings)")
    parser.add_argument("--red", choices=["manual", "ai"], help="Who plays red")
    parser.add_argument("--blue", choices=["manual", "ai"], help="Who plays blue")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for moves)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the session")
    parser.add_argument("--script", help="File of commands to run before reading input")
    return parser.parse_args(argv)
