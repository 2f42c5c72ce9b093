"""Генерация секрета для JWT_SECRET: python -m app.scripts.generate_jwt_secret"""

import secrets


def generate_secrets(length: int = 64) -> dict:
    return {
        "hex": secrets.token_hex(length),
        "urlsafe": secrets.token_urlsafe(length),
    }


def main() -> None:
    generated = generate_secrets()
    print("Secure JWT secrets (add one of them to your .env file):")
    print()
    print(f"JWT_SECRET={generated['hex']}")
    print()
    print("Alternative (URL-safe):")
    print(f"JWT_SECRET={generated['urlsafe']}")


if __name__ == "__main__":
    main()
