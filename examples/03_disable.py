"""
Disabling - keep test runs from posting to DIA
"""
from diapy import APIClient, Credentials


def main():
    APIClient.disable()

    with APIClient(Credentials("user@example.org", "secret")) as dia:
        # Skipped without touching the network
        print(dia.process("supporter", {"Email": "test@domain.org"}))

    APIClient.enable()
    print(f"Disabled: {APIClient.is_disabled()}")


if __name__ == "__main__":
    main()
