import argparse
import sys

from soundcloudfield.core import (
    configure_logging,
    log_error,
    log_info,
    log_success,
    log_warning,
)
from soundcloudfield.data import load_player_settings
from soundcloudfield.render import ClientRenderer, ServerRenderer
from soundcloudfield.soundcloud import OEmbedClient


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render SoundCloud players for one or more track/set URLs."
    )
    parser.add_argument("urls", nargs="+", help="SoundCloud track, set or artist URLs")
    parser.add_argument(
        "--client",
        action="store_true",
        help="emit placeholders and the initializer payload instead of fetching",
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="path to a player settings JSON file (default: SOUNDCLOUDFIELD_SETTINGS_FILE)",
    )
    return parser.parse_args(argv)


def run_server(urls, settings) -> int:
    client = OEmbedClient()
    try:
        elements = ServerRenderer(client, settings).render(urls)
    finally:
        client.close()

    for element in elements:
        print(element.markup)
        if not element.available:
            log_warning("Item rendered as unavailable.")
    return 0 if all(e.available for e in elements) else 1


def run_client(urls, settings) -> int:
    output = ClientRenderer(settings).render(urls)
    for markup in output.elements:
        print(markup)
    for entry in output.payload:
        print(entry.model_dump_json())
    log_info(f"Libraries to attach: {', '.join(output.libraries)}")
    return 0


def main(argv=None) -> int:
    configure_logging()
    args = parse_args(argv)
    settings = load_player_settings(args.settings)

    try:
        if args.client:
            status = run_client(args.urls, settings)
        else:
            status = run_server(args.urls, settings)
    except KeyboardInterrupt:
        log_error("Interrupted.")
        return 130

    if status == 0:
        log_success("Done.")
    return status


if __name__ == "__main__":
    sys.exit(main())
