def normalize_secret(secret: str) -> str:
    """
    Canonical form of a typed-in Base32 secret.

    Authenticator setup pages show secrets in lowercase groups like
    ``"abcd efgh ijkl"``; every whitespace character is dropped and the
    rest is uppercased.

    :param secret: the secret as the user supplied it
    :returns: the secret with whitespace removed, uppercased
    """
    return "".join(secret.split()).upper()


def pad_base32(secret: str) -> str:
    # Base32 input length must be a multiple of 8
    missing_padding = len(secret) % 8
    if missing_padding != 0:
        secret += "=" * (8 - missing_padding)
    return secret
