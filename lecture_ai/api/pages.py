from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["pages"])


INDEX_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>LectureAI</title>
  <style>
    body { margin: 0; font-family: system-ui, sans-serif; background: #f8fafc; color: #0f172a; }
    header { background: #fff; border-bottom: 1px solid #e2e8f0; padding: 1rem 2rem; display: flex; justify-content: space-between; }
    main { max-width: 64rem; margin: 0 auto; padding: 2rem 1rem; display: grid; gap: 1.5rem; }
    section, .card { background: #fff; border: 1px solid #e2e8f0; border-radius: 1rem; padding: 1.5rem; }
    textarea { width: 100%; min-height: 200px; box-sizing: border-box; padding: 1rem; border-radius: .75rem; border: 1px solid #e2e8f0; resize: vertical; }
    button { margin-top: 1rem; float: right; padding: .75rem 1.5rem; border: 0; border-radius: .75rem; background: #4f46e5; color: #fff; font-weight: 600; cursor: pointer; }
    button:disabled { opacity: .5; pointer-events: none; }
    #error { background: #fef2f2; border: 1px solid #fee2e2; color: #dc2626; padding: 1rem; border-radius: .75rem; }
    .columns { display: grid; grid-template-columns: repeat(auto-fit, minmax(18rem, 1fr)); gap: 1.5rem; }
    #questions li { font-style: italic; }
    footer { text-align: center; color: #94a3b8; font-size: .875rem; padding: 3rem 0; }
    [hidden] { display: none !important; }
  </style>
</head>
<body>
  <header><strong>LectureAI</strong><span>AI-Powered Study Assistant</span></header>
  <main>
    <section>
      <h2>Lecture Notes</h2>
      <textarea id="notes" placeholder="Paste your lecture notes here..."></textarea>
      <button id="generate" disabled>Generate Study Notes</button>
      <div style="clear: both"></div>
    </section>
    <div id="error" hidden></div>
    <div id="result" hidden>
      <div class="card"><h3>Summary</h3><p id="summary"></p></div>
      <div class="columns" style="margin-top: 1.5rem">
        <div class="card"><h3>Key Points</h3><ul id="keyPoints"></ul></div>
        <div class="card"><h3>Exam Questions</h3><ul id="questions"></ul></div>
      </div>
    </div>
  </main>
  <footer>LectureAI. Powered by Google Gemini.</footer>
  <script>
    const notes = document.getElementById("notes");
    const button = document.getElementById("generate");
    const errorBox = document.getElementById("error");
    let loading = false;

    function refresh() {
      button.disabled = loading || !notes.value.trim();
      button.textContent = loading ? "Generating..." : "Generate Study Notes";
    }

    function fill(listId, items) {
      const list = document.getElementById(listId);
      list.replaceChildren(...items.map((text) => {
        const li = document.createElement("li");
        li.textContent = text;
        return li;
      }));
    }

    async function generate() {
      if (!notes.value.trim()) return;
      loading = true;
      errorBox.hidden = true;
      refresh();
      try {
        const resp = await fetch("/api/v1/study_notes", {
          method: "POST",
          headers: { "Content-Type": "application/json" },
          body: JSON.stringify({ notes: notes.value }),
        });
        const body = await resp.json();
        if (!resp.ok || !body.ok) throw new Error(body.error || resp.statusText);
        document.getElementById("summary").textContent = body.result.summary;
        fill("keyPoints", body.result.keyPoints);
        fill("questions", body.result.examQuestions);
        document.getElementById("result").hidden = false;
      } catch (err) {
        console.error(err);
        errorBox.textContent = "Failed to generate study notes. Please try again.";
        errorBox.hidden = false;
      } finally {
        loading = false;
        refresh();
      }
    }

    notes.addEventListener("input", refresh);
    button.addEventListener("click", generate);
  </script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    return HTMLResponse(INDEX_HTML)


@router.get("/healthz")
async def healthz() -> dict:
    return {"ok": True}
