from __future__ import annotations
import argparse
import sys
from flask import Flask, request, jsonify, Response
from wordfind.engine import Engine
from wordfind.errors import InvalidInput, LoadError
from wordfind.config import TOP_K

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/rank")
def api_rank():
    q = request.args.get("q", "", type=str)
    raw_limit = request.args.get("limit")
    try:
        limit = TOP_K if raw_limit is None else int(raw_limit)
    except ValueError:
        return jsonify({"error": f"limit must be an integer, got {raw_limit!r}"}), 400
    if limit < 0:
        return jsonify({"error": f"limit must be >= 0, got {limit}"}), 400
    if not q:
        return jsonify([])
    try:
        rows = _engine.rank(q, limit)  # type: ignore[union-attr]
    except InvalidInput as e:
        return jsonify({"error": str(e)}), 400
    return jsonify([r.to_dict() for r in rows])

@app.get("/health")
def health():
    words = len(_engine.dictionary) if _engine is not None and _engine.dictionary is not None else 0
    return jsonify({"ok": words > 0, "words": words})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Word Finder</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:640px; margin:24px auto; padding:0 16px }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px }
h1{ font-size:20px; margin:0 0 8px 0 }
input{
  width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
input:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.row{ display:grid; grid-template-columns:3rem 1fr 5rem; gap:10px; padding:8px 12px; border-top:1px solid var(--border) }
.row.sel{ font-weight:700; color:var(--accent) }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Word Finder</h1>
      <form onsubmit="return false"><input id="q" type="text" placeholder="Type a word…" autocomplete="off" autofocus /></form>
      <div class="meta" id="stats">Ready.</div>
      <div id="out" class="empty">Start typing to see matches.</div>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), stats = document.querySelector("#stats");
let t, gen = 0;
async function search(){
  const mine = ++gen;
  const query = q.value;
  if(query.trim().length === 0){
    out.className = "empty"; out.textContent = "Start typing to see matches."; stats.textContent = "Ready."; return;
  }
  const t0 = performance.now();
  const resp = await fetch(`/api/rank?q=${encodeURIComponent(query)}&limit=20`);
  const data = await resp.json();
  if(mine !== gen) return; // a newer query is in flight
  stats.textContent = `Results: ${data.length} • ~${Math.max(1, Math.round(performance.now() - t0))} ms`;
  if(data.length === 0){ out.className = "empty"; out.textContent = "No matches."; return; }
  out.className = "";
  out.innerHTML = data.map((r,i)=>
    `<div class="row${i===0?" sel":""}"><div class="mono">${i+1}</div><div></div><div class="mono">${r.score.toFixed(3)}</div></div>`
  ).join("");
  out.querySelectorAll(".row").forEach((el,i)=>{ el.children[1].textContent = data[i].word; });
}
q.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(search, 60); });
window.addEventListener("keydown", (ev)=>{ if(ev.key === "Escape"){ q.value = ""; search(); } });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the Flask word finder on top of Engine")
    ap.add_argument("--dict", dest="dict_path", default=None)
    ap.add_argument("--case-sensitive", action="store_true")
    ap.add_argument("--workers", type=int, default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    return serve(args.dict_path, host=args.host, port=args.port, workers=args.workers,
                 case_sensitive=args.case_sensitive, verbose=args.verbose)

def serve(dict_path: str | None, *, host: str = "127.0.0.1", port: int = 8000,
          workers: int | None = None, case_sensitive: bool = False, verbose: bool = False) -> int:
    global _engine
    _engine = Engine(workers=workers)
    try:
        _engine.load(dict_path, case_sensitive=case_sensitive, verbose=verbose)
    except LoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    try:
        app.run(host=host, port=port, debug=verbose, use_reloader=False)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
