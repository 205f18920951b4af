from argparse import ArgumentParser
import logging
import sys

from podxcconfig.details.target import load_target
from podxcconfig.details.tools.generate import generate_main
from podxcconfig.details.tools.show import show_main
from podxcconfig.generators.xcconfig.parser import load_xcconfig


def main(argv=None):
    COMMANDS = {
        "generate": generate_main,
        "show": show_main,
    }
    parser = ArgumentParser(prog="podxcconfig")
    parser.add_argument("command", choices=COMMANDS.keys())
    parser.add_argument("--target", type=str, required=True, help="target description (JSON)")
    parser.add_argument("--public", type=str, required=True, help="public xcconfig of the target")
    parser.add_argument("--output", type=str, help="where to write the private xcconfig")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.command == "generate" and not args.output:
        parser.error("generate requires --output")
    # Log to stderr so show output stays a valid xcconfig
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    target = load_target(args.target)
    public_xcconfig = load_xcconfig(args.public)
    exit_code = COMMANDS[args.command](
        target=target,
        public_xcconfig=public_xcconfig,
        output=args.output,
    )
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
