"""Show command: dumps the remote state."""

from __future__ import annotations

import argparse

from linkboard import DesiredState, Linkboard, load_config


async def run_show(args: argparse.Namespace) -> DesiredState:
    config = load_config(args.config)
    state = await Linkboard(config=config).fetch(profile_page_id=args.profile_page_id)
    print(state.model_dump_json(by_alias=True, indent=2))
    return state


__all__ = ["run_show"]
