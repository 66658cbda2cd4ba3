import base64
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec


def to_base64url(data):
    """URL-Safe Base64 bez '=' (format wymagany przez VAPID)"""
    return base64.urlsafe_b64encode(data).rstrip(b'=').decode('utf-8')


def generate_vapid_keys():
    """Zwraca (private, public): 32-bajtowy skalar i nieskompresowany punkt P-256."""
    private_key = ec.generate_private_key(ec.SECP256R1())

    private_bytes = private_key.private_numbers().private_value.to_bytes(32, byteorder='big')
    public_bytes = private_key.public_key().public_bytes(
        serialization.Encoding.X962,
        serialization.PublicFormat.UncompressedPoint
    )
    return to_base64url(private_bytes), to_base64url(public_bytes)


def main():
    private_key, public_key = generate_vapid_keys()

    print("\nSkopiuj poniższe linie do pliku .env:\n")
    print(f"VAPID_PRIVATE_KEY={private_key}")
    print(f"VAPID_PUBLIC_KEY={public_key}")
    print("\n----------------------------------")


if __name__ == "__main__":
    main()
