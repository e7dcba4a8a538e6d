import asyncio

import bcrypt

# bcrypt only looks at the first 72 bytes of the secret
_BCRYPT_MAX_BYTES = 72


def _secret(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(_secret(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_secret(password), password_hash.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


async def hash_password_async(password: str, rounds: int = 10) -> str:
    return await asyncio.to_thread(hash_password, password, rounds)


async def verify_password_async(password: str, password_hash: str) -> bool:
    return await asyncio.to_thread(verify_password, password, password_hash)
