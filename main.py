# main.py
from chaingate.cli import CLI


def main():
    # Same as `chaingate serve` with host and port from config or env
    raise SystemExit(CLI().main(["serve"]))


if __name__ == "__main__":
    main()
