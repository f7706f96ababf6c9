import argparse
from dataclasses import dataclass

from consumer import DEFAULT_URL
from exceptions import ConfigurationError


@dataclass
class _Settings:
    url: str = DEFAULT_URL
    hash: str = ""
    token: str = ""

    def validate(self) -> "_Settings":
        if not self.url or not self.hash or not self.token:
            raise ConfigurationError("invalid arguments")
        return self


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dataproxy page consumption benchmark")
    parser.add_argument("--url", default=DEFAULT_URL, help="URL to dataproxy")
    parser.add_argument("--hash", default="", help="Hash of request")
    parser.add_argument("--token", default="", help="Token of first page")
    return parser


def get_settings(argv: list[str] | None = None) -> _Settings:
    args = build_parser().parse_args(argv)
    return _Settings(url=args.url, hash=args.hash, token=args.token).validate()


__all__ = ["get_settings", "build_parser", "_Settings"]
