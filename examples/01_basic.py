"""
Basic usage - fetch and save supporters
"""
import os

from diapy import APIClient, Credentials


def main():
    credentials = Credentials(os.environ["DIA_USERNAME"], os.environ["DIA_PASSWORD"])

    with APIClient(credentials) as dia:
        # Save a supporter and link it to two groups
        key = dia.process("supporter", {
            "Email": "austin@domain.org",
            "First_Name": "Austin",
            "link": {"groups": [12, 13]},
        })
        print(f"Saved supporter {key}")

        # Read it back
        for supporter in dia.get("supporter", key):
            print(f"  {supporter['supporter_KEY']}: {supporter['Email']}")

        # Session cookies picked up along the way
        print(f"Cookies: {dia.cookies}")


if __name__ == "__main__":
    main()
