"""cee-pretty — prettify @cee: JSON log lines read from stdin."""

from ceepretty.cli import run

if __name__ == "__main__":
    run()
