"""Run the web server: python -m notes_summarizer"""

from .web.app import run_server


if __name__ == "__main__":
    run_server()
