"""Exercise a running server: list photos, log in, toggle a tag and read the tagged photos back."""
import argparse
import requests


def run_smoke_test(base_url, username, password, photo_id=1, session=None):
    session = session or requests.Session()
    api = base_url.rstrip("/") + "/api"
    report = []

    response = session.get(f"{api}/photos", timeout=10)
    response.raise_for_status()
    report.append(f"server up, {len(response.json())} photos available")

    response = session.post(f"{api}/login", json={"username": username, "password": password}, timeout=10)
    if response.status_code != 200:
        report.append(f"login failed: {response.json().get('error')}")
        return False, report
    headers = {"Authorization": f"Bearer {response.json()['token']}"}
    report.append("login ok")

    response = session.post(f"{api}/photos/{photo_id}/tag", headers=headers, timeout=10)
    if response.status_code == 200:
        report.append(f"tag toggled: tagged={response.json()['tagged']}")
    else:
        report.append(f"tag failed: {response.json().get('error')}")

    response = session.get(f"{api}/user/tagged-photos", headers=headers, timeout=10)
    response.raise_for_status()
    report.append(f"{len(response.json())} tagged photos")
    return True, report


def main(argv=None):
    parser = argparse.ArgumentParser(description="Smoke test a running gallery API")
    parser.add_argument('--base-url', default='http://localhost:4001')
    parser.add_argument('--username', default='test')
    parser.add_argument('--password', default='test')
    parser.add_argument('--photo-id', type=int, default=1)
    args = parser.parse_args(argv)

    try:
        ok, report = run_smoke_test(args.base_url, args.username, args.password, args.photo_id)
    except requests.exceptions.RequestException as e:
        print(f"Could not reach {args.base_url}: {e}")
        return 1
    for line in report:
        print(line)
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
