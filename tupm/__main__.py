"""console script entrypoint for the tupm CLI."""


def run() -> int:
    from .main import main as cli_main

    return cli_main()


if __name__ == "__main__":
    raise SystemExit(run())
