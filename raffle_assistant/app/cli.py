"""`raffle-assistant-app`: serve the raffle page with Streamlit."""

import sys
from pathlib import Path

PAGE_PATH = Path(__file__).parent / "streamlit.py"


def build_streamlit_argv(extra_args: list[str]) -> list[str]:
    """Command line for ``streamlit run`` on the raffle page.

    Runs headless unless the caller passes its own ``--server.headless``;
    any other flags (e.g. ``--server.port 8502``) are forwarded unchanged.
    """
    argv = ["streamlit", "run", str(PAGE_PATH)]
    if not any(arg.startswith("--server.headless") for arg in extra_args):
        argv += ["--server.headless", "true"]
    return argv + list(extra_args)


def main() -> None:
    from streamlit.web.cli import main as streamlit_main

    sys.argv = build_streamlit_argv(sys.argv[1:])
    streamlit_main()


if __name__ == "__main__":
    main()
