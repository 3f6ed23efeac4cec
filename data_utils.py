import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from errors import InvalidShareData
from general_utils import EncodedShare, ReconstructionRequest


# ========= Models =========
class KeysRecord(BaseModel):
    n: int = Field(..., description="Numero totale di share")
    k: int = Field(..., description="Soglia: punti usati per l'interpolazione")


class ShareRecord(BaseModel):
    # nel file la base è una stringa ("16"), pydantic la converte in int
    base: int
    value: str = Field(..., min_length=1)


def parse_data(data):
    """
    Converte il record JSON già caricato in (share, richiesta).
    Vengono lette solo le chiavi "1".."n"; il range della base non è
    verificato qui ma dal decoder.
    """
    if not isinstance(data, dict) or "keys" not in data:
        raise InvalidShareData("Dati non validi: manca la sezione 'keys'.")

    try:
        keys = KeysRecord.model_validate(data["keys"])
    except ValidationError as e:
        raise InvalidShareData(f"Sezione 'keys' non valida: {e}") from e

    shares = []
    for i in range(1, keys.n + 1):
        key = str(i)
        if key not in data:
            continue
        try:
            record = ShareRecord.model_validate(data[key])
        except ValidationError as e:
            raise InvalidShareData(f"Share '{key}' non valida: {e}") from e
        shares.append(EncodedShare(index=i, base=record.base, value=record.value))

    return shares, ReconstructionRequest(n=keys.n, k=keys.k)


def load_data(path):
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise InvalidShareData(f"Impossibile leggere '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidShareData(f"'{path}' non è un JSON valido: {e}") from e

    return parse_data(data)


def dump_data(shares, request, path):
    data = {"keys": KeysRecord(n=request.n, k=request.k).model_dump()}
    for share in sorted(shares, key=lambda s: s.index):
        data[str(share.index)] = {"base": str(share.base), "value": share.value}

    Path(path).write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")
    return data
