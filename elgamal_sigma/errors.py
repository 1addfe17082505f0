"""Exceptions raised by elgamal_sigma."""


class ElGamalSigmaError(Exception):
    """Base class for errors raised by this package."""


class SerializationFailure(ElGamalSigmaError):
    """
    The group backend could not encode an element it produced itself.

    This is an internal invariant violation (a broken backend), not a
    caller mistake, and must not be retried.  Note that a proof that
    fails to verify is *not* an error: ``verify`` simply returns False.
    """
