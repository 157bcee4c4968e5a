import sys

import httpx

API_BASE = "http://localhost:8000/api/v1"

def run_audit(path: str, url: str = ""):
    print(f"Starting audit for {path}...")
    try:
        with open(path, encoding="utf-8") as f:
            html = f.read()

        print("Sending POST request to run audit...")
        resp = httpx.post(f"{API_BASE}/audit", json={"html": html, "url": url}, timeout=30.0)
        resp.raise_for_status()
        report = resp.json()

        for item in report["seo"] + report["ux"]:
            print(f"[{item['status']:<9}] {item['name']}: {item['details']}")
        print(f"Summary: {report['summary']}")

    except (OSError, httpx.HTTPError) as e:
        print(f"Error: {e}")

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: python run_audit.py <file.html> [url]")
        sys.exit(1)
    run_audit(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else "")
