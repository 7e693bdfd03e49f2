"""Print the shape of every cached query in a page's __NEXT_DATA__ payload.

Usage:
  python scripts/inspect_next_data.py [URL | path/to/page.html]

Handy when the page layout changes and recipes stop showing up.
"""

import sys
import pathlib
import json
from dotenv import load_dotenv

load_dotenv()

# Ensure project root is on sys.path so the package can be imported
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from hello_fresh_scrape.ingest.fetch import iter_body, open_page
from hello_fresh_scrape.ingest.payload import decode_envelope
from hello_fresh_scrape.ingest.scan import extract_next_data
from hello_fresh_scrape.settings import settings

target = sys.argv[1] if len(sys.argv) > 1 else settings.RECIPE_PAGE
if target.startswith(("http://", "https://")):
    with open_page(target) as resp:
        raw = extract_next_data(iter_body(resp))
else:
    with open(target, "rb") as fh:
        raw = extract_next_data(fh)

print('Payload size', len(raw), 'bytes')
envelope = decode_envelope(raw)
queries = envelope.props.page_props.ssr_payload.dehydrated_state.queries
print('Found', len(queries), 'queries')
for i, q in enumerate(queries):
    data = q.state.data
    kind = type(data).__name__
    if isinstance(data, dict):
        items = data.get('items')
        detail = f"keys={sorted(data)[:8]} items={len(items) if isinstance(items, list) else '-'}"
    elif isinstance(data, list):
        detail = f"len={len(data)}"
    else:
        detail = json.dumps(data)[:60]
    print(f'--- query {i}: {kind} {detail}')
