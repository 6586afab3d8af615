from __future__ import annotations

from typing import Optional, Sequence

from .cli import format_records, parse_args, validate_args
from .client import StoryClient
from .models import PageContent
from .pacing import FixedDelay
from .ui import ConsoleUI


def run(argv: Optional[Sequence[str]] = None, *, client: Optional[StoryClient] = None) -> str:
    args = parse_args(argv)
    validate_args(args)

    ui = ConsoleUI()
    if client is None:
        client = StoryClient(
            timeout=args.timeout,
            max_pages=getattr(args, "max_pages", 1),
            pacing=FixedDelay(getattr(args, "delay", 0.0)),
            ui=ui,
        )

    try:
        with client:
            if args.command == "read" and args.single:
                text = client.read_page(args.url)
                page = PageContent(page_number=1, url=args.url, content=text)
                output = format_records([page], args.json) if args.json else text
            elif args.command == "read":
                result = client.read(args.url)
                if result.error is not None:
                    ui.log_event(f"Read {len(result)} page(s) before failing.", level="warning")
                else:
                    ui.log_event(f"Read {len(result)} page(s).", level="success")
                output = format_records(result.pages, args.json) if args.json else result.content
            elif args.command == "parts":
                parts = client.get_parts(args.url)
                ui.log_event(f"Found {len(parts)} parts.", level="success")
                output = format_records(parts, args.json)
            else:
                results = client.search(args.query)
                ui.log_event(f"Found {len(results)} stories.", level="success")
                output = format_records(results, args.json)
    except KeyboardInterrupt:
        ui.log_event("Interrupted by user.", level="error")
        raise SystemExit("Interrupted by user.")
    except Exception as exc:
        ui.log_event(str(exc), level="error")
        raise SystemExit(str(exc)) from None
    finally:
        ui.finalize()

    print(output, flush=True)
    return output


def main() -> None:
    run()


if __name__ == "__main__":
    main()
