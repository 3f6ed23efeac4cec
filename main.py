import argparse
import logging
import os
import random
import sys

from base_utils import MAX_BASE, MIN_BASE, encode
from data_utils import dump_data, load_data
from errors import SecretRecoveryError
from general_utils import EncodedShare, ReconstructionRequest, format_big_number, solve
from sss_utils import create_shares

# ====================================================================
# PARAMETRI
# ====================================================================
DEFAULT_DATA_FILE = os.environ.get("SSS_DATA_FILE", "data.json")
DEFAULT_MAX_BASE = 16


def print_result(result, label):
    print(f"Risoluzione con k = {len(result.points)} punti:")
    for x, y in result.points:
        print(f"  (x={x}, y={format_big_number(y)})")
    print("-" * 30)
    print(f"{label}: {format_big_number(result.secret, limit=None)}")


def cmd_solve(args):
    shares, request = load_data(args.file)
    print("\n" + "=" * 20 + " RICOSTRUZIONE DEL SEGRETO " + "=" * 20)
    print(f"File: {args.file}  (n = {request.n}, k = {request.k})")
    result = solve(shares, request)
    print_result(result, "Il 'segreto c' calcolato è")


def cmd_evaluate(args):
    shares, request = load_data(args.file)
    print("\n" + "=" * 20 + f" VALUTAZIONE IN x = {args.x} " + "=" * 20)
    result = solve(shares, request, x_target=args.x)
    print_result(result, f"P({args.x})")


def cmd_generate(args):
    rng = random.Random(args.seed)
    request = ReconstructionRequest(n=args.n, k=args.k)
    if args.secret < 0:
        raise SecretRecoveryError("Il segreto deve essere non negativo.")

    points = create_shares(args.secret, request.k, request.n, rng=rng)
    shares = []
    for x, y in points:
        base = rng.randint(MIN_BASE, args.max_base)
        shares.append(EncodedShare(index=x, base=base, value=encode(y, base)))

    dump_data(shares, request, args.out)
    print(f"Scritte {len(shares)} share (soglia {request.k}) in '{args.out}'.")


def build_parser():
    ap = argparse.ArgumentParser(prog="sss-recovery", description="Ricostruzione del termine noto da share in base arbitraria")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log di debug")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_solve = sub.add_parser("solve", help="Ricostruisci il segreto c = P(0)")
    ap_solve.add_argument("--file", default=DEFAULT_DATA_FILE, help=f"File JSON delle share (default: {DEFAULT_DATA_FILE})")
    ap_solve.set_defaults(func=cmd_solve)

    ap_eval = sub.add_parser("evaluate", help="Valuta il polinomio interpolante in un x arbitrario")
    ap_eval.add_argument("--x", type=int, required=True, help="Ascissa in cui valutare")
    ap_eval.add_argument("--file", default=DEFAULT_DATA_FILE)
    ap_eval.set_defaults(func=cmd_evaluate)

    ap_gen = sub.add_parser("generate", help="Genera un file di share da un polinomio casuale")
    ap_gen.add_argument("--n", type=int, required=True, help="Numero di share")
    ap_gen.add_argument("--k", type=int, required=True, help="Soglia")
    ap_gen.add_argument("--secret", type=int, required=True, help="Termine noto del polinomio")
    ap_gen.add_argument("--max-base", type=int, default=DEFAULT_MAX_BASE, choices=range(MIN_BASE, MAX_BASE + 1),
                        metavar=f"{{{MIN_BASE}..{MAX_BASE}}}", help=f"Base massima (default: {DEFAULT_MAX_BASE})")
    ap_gen.add_argument("--seed", type=int, default=None)
    ap_gen.add_argument("--out", default=DEFAULT_DATA_FILE)
    ap_gen.set_defaults(func=cmd_generate)

    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        args.func(args)
    except SecretRecoveryError as e:
        print(f"Errore: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
