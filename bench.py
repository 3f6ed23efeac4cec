import logging
import random
import time

import matplotlib.pyplot as plt
import numpy as np

from base_utils import MAX_BASE, MIN_BASE, encode
from general_utils import EncodedShare, ReconstructionRequest, collect_points, format_big_number
from sss_utils import create_shares, reconstruct_from_shares

# ====================================================================
# PARAMETRI
# ====================================================================
THRESHOLDS = [2, 5, 10, 25, 50, 100]
EXTRA_SHARES = 2
SECRET_BITS = 256
RUNS_PER_THRESHOLD = 5
PLOT_FILE = 'reconstruction_times.png'


def make_encoded_shares(secret, k_threshold, n_share, rng):
    """Share di un polinomio casuale, ognuna codificata in una base casuale."""
    shares = []
    for x, y in create_shares(secret, k_threshold, n_share, rng=rng):
        base = rng.randint(MIN_BASE, MAX_BASE)
        shares.append(EncodedShare(index=x, base=base, value=encode(y, base)))
    rng.shuffle(shares)
    return shares


def run_reconstruction_test(k_threshold, rng):
    """
    Misura separatamente la fase di decodifica e quella di interpolazione
    per una soglia k. Ritorna (timings, corretto).
    """
    secret = rng.getrandbits(SECRET_BITS)
    n_share = k_threshold + EXTRA_SHARES
    shares = make_encoded_shares(secret, k_threshold, n_share, rng)
    request = ReconstructionRequest(n=n_share, k=k_threshold)

    timings = {}

    start_decode = time.perf_counter()
    points = collect_points(shares, request)
    timings['decode'] = time.perf_counter() - start_decode

    start_interp = time.perf_counter()
    reconstructed = reconstruct_from_shares(points)
    timings['interpolate'] = time.perf_counter() - start_interp

    logging.debug(f'k = {k_threshold}: segreto {format_big_number(secret)}, ricostruito {format_big_number(reconstructed)}')
    return timings, reconstructed == secret


def plot_times(thresholds, decode_times, interpolate_times, path=PLOT_FILE):
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(thresholds, decode_times, marker='o', label='Decodifica')
    ax.plot(thresholds, interpolate_times, marker='s', label='Lagrange')
    ax.set_xlabel('Soglia k')
    ax.set_ylabel('Tempo medio (s)')
    ax.set_yscale('log')
    ax.legend()
    ax.grid(alpha=0.3, linestyle='--')
    fig.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)


def main(seed=None):
    rng = random.Random(seed)

    print("\n" + "="*20 + " BENCHMARK RICOSTRUZIONE " + "="*20)
    print(f"{'k':<8} {'Decode (s)':<14} {'Lagrange (s)':<14} {'Status':<10}")

    decode_means = []
    interpolate_means = []
    for k_threshold in THRESHOLDS:
        runs = [run_reconstruction_test(k_threshold, rng) for _ in range(RUNS_PER_THRESHOLD)]
        decode_means.append(np.mean([timings['decode'] for timings, _ in runs]))
        interpolate_means.append(np.mean([timings['interpolate'] for timings, _ in runs]))
        status = "✓ OK" if all(ok for _, ok in runs) else "✗ FAIL"
        print(f"{k_threshold:<8} {decode_means[-1]:<14.6f} {interpolate_means[-1]:<14.6f} {status:<10}")

    plot_times(THRESHOLDS, decode_means, interpolate_means)
    print(f"Grafico salvato come '{PLOT_FILE}'")

    return decode_means, interpolate_means


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
