import argparse
import asyncio
import os
import sys

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "backend")))

from app.services.audit_runner import AuditRunner
from app.services.document import DocumentSnapshot, Layout


async def main():
    parser = argparse.ArgumentParser(description="Audit a local HTML file in-process.")
    parser.add_argument("path", help="HTML file to audit")
    parser.add_argument("--url", default="", help="URL the document was served from")
    parser.add_argument("--width", type=int, default=0, help="Viewport width in CSS pixels")
    args = parser.parse_args()

    with open(args.path, encoding="utf-8") as f:
        html = f.read()

    snapshot = DocumentSnapshot(
        html=html,
        url=args.url,
        layout=Layout(client_width=args.width, inner_width=args.width)
    )
    print(f"Running audit for {args.path}...")

    runner = AuditRunner()
    report = await runner.run(snapshot)

    for section, items in (("SEO", report.seo), ("UX", report.ux)):
        print(f"\n{section}")
        for item in items:
            print(f"  [{item.status:<9}] {item.name}: {item.details}")

    print(f"\nSummary: {report.summary}")

if __name__ == "__main__":
    asyncio.run(main())
