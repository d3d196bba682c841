import bcrypt

# --------------------- Encryption/Validation --------------------- #

SALT_ROUNDS = 10


def hash_password(password: str) -> str:
    if not password or not isinstance(password, str):
        raise ValueError("Invalid password provided")
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=SALT_ROUNDS)).decode('utf-8')


def check_password(password: str, hashed_password: str) -> bool:
    if not password or not hashed_password:
        raise ValueError("Password and hash must be provided")
    return bcrypt.checkpw(password.encode('utf-8'), hashed_password.encode('utf-8'))
