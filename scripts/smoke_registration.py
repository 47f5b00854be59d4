#!/usr/bin/env python
"""
End-to-end smoke test against a running registration service.

Walks through the whole review cycle over HTTP:
register -> list -> fetch upload -> approve -> delete.

Usage:
    python manage.py runserver
    python scripts/smoke_registration.py [base_url]
"""
import json
import sys
import time

import requests

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"

# Smallest well-formed PDF the server will accept
SAMPLE_PDF = (
    b"%PDF-1.4\n1 0 obj<</Type/Catalog/Pages 2 0 R>>endobj\n"
    b"2 0 obj<</Type/Pages/Kids[]/Count 0>>endobj\ntrailer<</Root 1 0 R>>\n%%EOF\n"
)


def print_step(step_num, title):
    print(f"\n{'=' * 80}")
    print(f"STEP {step_num}: {title}")
    print(f"{'=' * 80}\n")


def run():
    email = f"smoke.{int(time.time())}@example.com"
    form = {
        "firstName": "Smoke",
        "lastName": "Test",
        "email": email,
        "gender": "female",
        "phone": "+2348000000000",
        "country": "Nigeria",
        "state": "Lagos",
        "city": "Ikeja",
        "address": "1 Test Street",
        "idType": "passport",
    }

    print_step(1, "REGISTER")
    response = requests.post(
        f"{BASE_URL}/register",
        data=form,
        files={"idFile": ("passport.pdf", SAMPLE_PDF, "application/pdf")},
        timeout=30,
    )
    print(f"{response.status_code} {json.dumps(response.json(), indent=2)}")
    if response.status_code != 201:
        print("❌ Registration failed, stopping")
        return False
    registration = response.json()["data"]

    print_step(2, "DUPLICATE REGISTRATION IS REJECTED")
    response = requests.post(
        f"{BASE_URL}/register",
        data=form,
        files={"idFile": ("passport.pdf", SAMPLE_PDF, "application/pdf")},
        timeout=30,
    )
    print(f"{response.status_code} {response.json()}")

    print_step(3, "LIST REGISTRATIONS")
    response = requests.get(f"{BASE_URL}/users", timeout=30)
    emails = [item["email"] for item in response.json()]
    print(f"{response.status_code} - {len(emails)} registrations, ours listed: {email in emails}")

    print_step(4, "FETCH UPLOADED DOCUMENT")
    response = requests.get(f"{BASE_URL}{registration['idFileUrl']}", timeout=30)
    print(f"{response.status_code} - {len(response.content)} bytes")

    print_step(5, "APPROVE")
    response = requests.post(
        f"{BASE_URL}/users/update-status",
        json={"userId": registration["id"], "status": "approved"},
        timeout=30,
    )
    print(f"{response.status_code} {response.json()}")

    print_step(6, "DELETE")
    response = requests.delete(f"{BASE_URL}/users/{registration['id']}", timeout=30)
    print(f"{response.status_code} {response.json()}")

    response = requests.get(f"{BASE_URL}{registration['idFileUrl']}", timeout=30)
    print(f"Uploaded document after delete: {response.status_code} (expected 404)")
    return True


if __name__ == "__main__":
    sys.exit(0 if run() else 1)
