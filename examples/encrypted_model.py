"""
Example of encrypting fields of a pydantic model and of a plain document.

This example demonstrates wrapping existing data objects in an EncryptedProxy
so that sensitive fields are stored encrypted while the rest stay readable.
"""

import json
from typing import Optional

from pydantic import BaseModel

from encryption_wrapper import EncodingMode, EncryptedProxy, ProxyOptions


class UserRecord(BaseModel):
    """
    User record with sensitive fields.

    The model itself knows nothing about encryption; the proxy decides which
    fields are stored encrypted.
    """

    name: str
    email: str
    ssn: Optional[str] = None
    credit_card: Optional[str] = None

    def masked_email(self) -> str:
        user, _, domain = self.email.partition("@")
        return f"{user[:1]}***@{domain}"


def main() -> None:
    """Example usage of EncryptedProxy with a model and a document."""
    key = "example-key-for-demonstration"

    # Text-safe mode keeps every stored value a str, so the model stays serialisable
    user = UserRecord(name="John Doe", email="john@example.com")
    options = ProxyOptions(encrypted={"ssn", "credit_card"}, encoding=EncodingMode.TEXT_SAFE)
    proxy = EncryptedProxy(user, key, "AES-256-CBC", options)

    proxy.set("ssn", "123-45-6789")
    proxy.set("credit_card", "4242-4242-4242-4242")

    print("\nStored model (encrypted sensitive fields):")
    print(json.dumps(user.model_dump(), indent=2))

    print("\nRead through the proxy:")
    for field in ("name", "email", "ssn", "credit_card"):
        print(f"  {field}: {proxy.get(field)}")
    print(f"  masked email: {proxy.call('masked_email')}")

    # Raw mode stores bytes, suitable for binary columns or documents
    document: dict[str, object] = {"title": "Quarterly report"}
    doc_proxy = EncryptedProxy(document, key, "AES-128-CBC", {"encrypted": "body", "encoding": "raw"})
    doc_proxy["body"] = "Revenue is up."

    print("\nStored document:")
    for field, value in document.items():
        print(f"  {field}: {value!r}")
    print(f"Decrypted body: {doc_proxy['body']}")


if __name__ == "__main__":
    main()
