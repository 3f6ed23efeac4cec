import logging
from dataclasses import dataclass
from typing import Tuple, Union

from sympy import Rational

from base_utils import decode
from errors import InsufficientPoints, InvalidRequest
from sss_utils import Point, interpolate

# ~3000 cifre decimali, sotto il limite di conversione int -> str
MAX_DECIMAL_BITS = 10000


@dataclass(frozen=True)
class EncodedShare:
    index: int
    base: int
    value: str


@dataclass(frozen=True)
class ReconstructionRequest:
    n: int
    k: int

    def __post_init__(self):
        if not 1 <= self.k <= self.n:
            raise InvalidRequest(f"Richiesta non valida: serve 1 <= k <= n (n = {self.n}, k = {self.k})")


@dataclass(frozen=True)
class ReconstructionResult:
    secret: Union[int, Rational]
    points: Tuple[Point, ...]


def collect_points(shares, request):
    """
    Decodifica le share con indice in [1, n] e restituisce i primi k punti
    in ordine di indice crescente (non di posizione nell'input).
    Tutte le share selezionate vengono decodificate: una share malformata
    invalida l'intera ricostruzione.
    """
    selected = sorted(
        (share for share in shares if 1 <= share.index <= request.n),
        key=lambda share: share.index,
    )

    all_points = []
    for share in selected:
        y = decode(share.value, share.base)
        logging.debug(f'Share {share.index}: {len(share.value)} cifre in base {share.base} -> {y.bit_length()} bit')
        all_points.append(Point(share.index, y))

    if len(all_points) < request.k:
        raise InsufficientPoints(len(all_points), request.k)

    return all_points[:request.k]


def solve(shares, request, x_target=0):
    points = collect_points(shares, request)
    logging.debug(f'Uso {len(points)} punti su {request.n}: {[p.x for p in points]}')
    return ReconstructionResult(interpolate(points, x_target), tuple(points))


def reconstruct(shares, request):
    """Ricostruisce il segreto c = P(0) dalle prime k share decodificate."""
    return solve(shares, request).secret


def format_big_number(value, limit=30) -> str:
    """
    Rappresentazione leggibile di un intero (o Rational) anche enorme.
    Oltre MAX_DECIMAL_BITS niente str(): da Python 3.11 la conversione
    decimale oltre 4300 cifre solleva ValueError, quindi si passa all'esadecimale.
    Con limit=None il valore non viene troncato.
    """
    if isinstance(value, Rational) and not value.is_integer:
        return f"{format_big_number(int(value.p), limit)}/{format_big_number(int(value.q), limit)}"

    value = int(value)
    if value.bit_length() > MAX_DECIMAL_BITS:
        value_str = hex(value)
        suffix = f" ({value.bit_length()} bit)"
    else:
        value_str = str(value)
        suffix = ""

    if limit is not None and len(value_str) > limit:
        keep = limit // 2
        value_str = f"{value_str[:keep]}...{value_str[-keep:]}"
    return value_str + suffix
