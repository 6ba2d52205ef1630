# src/chaingate/cli/cli.py
import argparse
import json
import sys
from typing import List, Optional

import uvicorn
from fastapi import HTTPException

from ..api.server import build_explorer, create_app_from_config
from ..config.settings import GatewayConfig
from ..exceptions import ConfigError
from ..monitoring.logging_config import LogConfig


class CLI:
    def main(self, args: Optional[List[str]] = None) -> int:
        parser = self.create_parser()
        args = parser.parse_args(args)

        if not hasattr(args, 'func'):
            parser.print_help()
            return 1

        try:
            config = GatewayConfig(config_path=args.config)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        LogConfig(
            environment=config.get("monitoring.environment"),
            log_dir=config.get("monitoring.log_dir"),
            level=config.get("monitoring.log_level"),
        ).setup_logging()

        return args.func(args, config)

    def create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='chaingate CLI')
        parser.add_argument('--config', help='Path to a YAML config file')
        subparsers = parser.add_subparsers(title='commands', dest='command')

        serve = subparsers.add_parser('serve', help='Run the HTTP gateway')
        serve.add_argument('--host', help='Bind host (default from config)')
        serve.add_argument('--port', type=int, help='Bind port (default from config)')
        serve.set_defaults(func=self.serve)

        block = subparsers.add_parser('block', help='Fetch a block with its transactions')
        block.add_argument('network', help="Network id: 'btc', 'ltc' or 'doge'")
        selector = block.add_mutually_exclusive_group()
        selector.add_argument('--height', help='Block height')
        selector.add_argument('--blockhash', help='Block hash')
        block.set_defaults(func=self.get_block)

        tx = subparsers.add_parser('tx', help='Fetch a transaction')
        tx.add_argument('network', help="Network id: 'btc', 'ltc' or 'doge'")
        tx.add_argument('txhash', help='Transaction hash')
        tx.set_defaults(func=self.get_transaction)

        return parser

    def serve(self, args, config: GatewayConfig) -> int:
        host = args.host or config.get("server.host")
        port = args.port or config.get("server.port")
        uvicorn.run(create_app_from_config(config), host=host, port=port, log_config=None)
        return 0

    def get_block(self, args, config: GatewayConfig) -> int:
        explorer = build_explorer(config)
        return self._print(explorer, lambda: explorer.get_block(
            args.network, height=args.height, blockhash=args.blockhash))

    def get_transaction(self, args, config: GatewayConfig) -> int:
        explorer = build_explorer(config)
        return self._print(explorer, lambda: explorer.get_transaction(args.network, args.txhash))

    def _print(self, explorer, fetch) -> int:
        try:
            payload = fetch()
        except HTTPException as e:
            print(f"Error ({e.status_code}): {e.detail}", file=sys.stderr)
            return 1
        finally:
            explorer.client.close()
        print(json.dumps(payload, indent=2))
        return 0


def main() -> None:
    sys.exit(CLI().main(sys.argv[1:]))
