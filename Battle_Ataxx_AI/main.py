"""Entry point for Battle Ataxx sessions. Load config, wire input and display, start Ataxxgame."""

import sys

try:
    from utils.cli import parse_args
    from utils.logger import log_event, ConsoleReporter
    from utils.settings import load_settings
    from Ataxxgame import Ataxxgame
    from engine.sources import ConsoleSource, ReaderSource
    from gui.pygame_view import PygameView
except ImportError:
    from Battle_Ataxx_AI.utils.cli import parse_args
    from Battle_Ataxx_AI.utils.logger import log_event, ConsoleReporter
    from Battle_Ataxx_AI.utils.settings import load_settings
    from Battle_Ataxx_AI.Ataxxgame import Ataxxgame
    from Battle_Ataxx_AI.engine.sources import ConsoleSource, ReaderSource
    from Battle_Ataxx_AI.gui.pygame_view import PygameView


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    depth = args.depth or settings.get("search_depth", 4)
    red_player = args.red or settings.get("red_player", "manual")
    blue_player = args.blue or settings.get("blue_player", "ai")
    seed = args.seed if args.seed is not None else settings.get("seed")
    use_gui = args.gui or bool(settings.get("gui", False))

    view = PygameView() if use_gui else None
    source = view if view else ConsoleSource()

    game = Ataxxgame(
        source=source,
        reporter=ConsoleReporter(),
        depth=depth,
        red_player=red_player,
        blue_player=blue_player,
        seed=seed,
        renderer=view.render if view else None,
        closer=view.close if view else None,
    )

    if args.script:
        try:
            stream = open(args.script, "r", encoding="utf-8")
        except OSError as exc:
            log_event(f"Warning: cannot open script {args.script}: {exc}; reading input only.")
        else:
            game.add_source(ReaderSource(stream, echo=True))

    game.process()
    return 0


if __name__ == "__main__":
    sys.exit(main())
