class SecretRecoveryError(ValueError):
    """Errore base: input non valido per la ricostruzione del segreto."""


class InvalidBase(SecretRecoveryError):

    def __init__(self, base):
        self.base = base
        super().__init__(f"Base {base!r} non valida: deve essere un intero tra 2 e 36")


class InvalidDigit(SecretRecoveryError):

    def __init__(self, value, base, position=None):
        self.value = value
        self.base = base
        self.position = position
        if position is None:
            message = f"Valore vuoto: nessuna cifra da decodificare in base {base}"
        else:
            message = f"Cifra non valida '{value[position]}' (posizione {position}) per la base {base}"
        super().__init__(message)


class DuplicateAbscissa(SecretRecoveryError):

    def __init__(self, x):
        self.x = x
        super().__init__(f"Dati non validi: x = {x} compare più di una volta, le ascisse devono essere uniche")


class InsufficientPoints(SecretRecoveryError):

    def __init__(self, available, required):
        self.available = available
        self.required = required
        super().__init__(f"Punti insufficienti: disponibili {available}, richiesti {required}")


class InvalidRequest(SecretRecoveryError):
    """Parametri n, k incoerenti (serve 1 <= k <= n)."""


class InvalidShareData(SecretRecoveryError):
    """File o record delle share malformato."""
