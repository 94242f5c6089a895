# main.py
import argparse

from config import AppConfig
from runners.run_headless import main as simulate

_DEFAULTS = AppConfig()

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Deterministic snake engine")
    p.add_argument("mode", choices=["simulate"])
    p.add_argument("--width", type=int, default=_DEFAULTS.grid_w)
    p.add_argument("--height", type=int, default=_DEFAULTS.grid_h)
    p.add_argument("--ticks", type=int, default=_DEFAULTS.max_ticks)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--rng", choices=["numpy", "python", "lcg", "scripted"], default=_DEFAULTS.rng)
    p.add_argument("--storage", choices=["numpy", "list"], default=_DEFAULTS.storage)
    p.add_argument("--turn-prob", type=float, default=_DEFAULTS.turn_prob)
    p.add_argument("--log", dest="log_path", default=None, help="append tick scalars to this CSV")
    p.add_argument("--log-every", type=int, default=_DEFAULTS.log_every)
    p.add_argument("--no-restart", action="store_true", help="stop at the first lost game")
    p.add_argument("--print-board", action="store_true")
    return p.parse_args(argv)

def config_from_args(args) -> AppConfig:
    return AppConfig().with_(
        grid_w=args.width,
        grid_h=args.height,
        max_ticks=args.ticks,
        seed=args.seed,
        rng=args.rng,
        storage=args.storage,
        turn_prob=args.turn_prob,
        log_path=args.log_path,
        log_every=args.log_every,
        restart_on_lost=not args.no_restart,
        print_board=args.print_board,
    )

def main(argv=None):
    args = parse_args(argv)
    if args.mode == "simulate":
        simulate(config_from_args(args))

if __name__ == "__main__":
    main()
