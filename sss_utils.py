import logging
import random
from typing import NamedTuple

from sympy import Rational

from errors import DuplicateAbscissa, InsufficientPoints

DEFAULT_MAX_COEFFICIENT = 2 ** 64


class Point(NamedTuple):
    x: int
    y: int


def evaluate_polynomial(coefficients, x):
    """Valuta il polinomio (coefficienti dal termine noto in su) con Horner."""
    y = 0
    for coeff in reversed(coefficients):
        y = y * x + coeff
    return y


""" Crea n share su un polinomio intero casuale di grado t - 1 con termine noto `secret`. """
def create_shares(secret, t_threshold, n_share, max_coefficient=DEFAULT_MAX_COEFFICIENT, rng=None):

    if not 1 <= t_threshold <= n_share:
        raise ValueError("La soglia deve essere compresa tra 1 e il numero di share.")

    rng = rng or random
    coefficients = [secret]
    for _ in range(t_threshold - 1):
        coefficients.append(rng.randint(1, max_coefficient))

    return [Point(x, evaluate_polynomial(coefficients, x)) for x in range(1, n_share + 1)]


def interpolate(points, x_target):
    """
    Valuta in x_target il polinomio interpolante di grado minimo (forma di Lagrange).

    Numeratore e denominatore di ogni base L_j sono prodotti interi esatti,
    ogni termine y_j * L_j è un Rational di sympy: nessun errore di arrotondamento.
    Ritorna un int se il risultato è intero, altrimenti il Rational esatto.
    """
    points = [Point(*p) for p in points]
    if not points:
        raise InsufficientPoints(0, 1)

    seen = set()
    for xj, _ in points:
        if xj in seen:
            raise DuplicateAbscissa(xj)
        seen.add(xj)

    result = Rational(0)
    for j, (xj, yj) in enumerate(points):
        numerator = 1
        denominator = 1
        for m, (xm, _) in enumerate(points):
            if m != j:
                numerator *= x_target - xm
                denominator *= xj - xm
        result += Rational(yj * numerator, denominator)

    logging.debug(f'Interpolazione di {len(points)} punti in x = {x_target}: numeratore di {result.p.bit_length()} bit')
    if result.is_integer:
        return int(result)
    return result


"""Ricostruisce il segreto (termine noto) interpolando in x = 0."""
def reconstruct_from_shares(points):
    return interpolate(points, 0)
