"""Single-page web UI (welcome screen + journal dashboard).

Pure presentation: every action goes through the JSON API under /api/v1.
"""

FAVICON_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 64">
<defs><linearGradient id="g" x1="0" y1="0" x2="64" y2="64" gradientUnits="userSpaceOnUse">
<stop offset="0" stop-color="#9333ea"/><stop offset="1" stop-color="#2563eb"/></linearGradient></defs>
<rect width="64" height="64" rx="14" fill="url(#g)"/>
<rect x="16" y="14" width="32" height="36" rx="3" fill="none" stroke="#fff" stroke-width="3"/>
<path d="M16 22h6M16 30h6M16 38h6M42 22h6M42 30h6M42 38h6" stroke="#fff" stroke-width="3"/>
</svg>"""


def get_index_html() -> str:
    return r"""<!doctype html><html><head>
<meta charset="utf-8"><meta name="viewport" content="width=device-width, initial-scale=1">
<title>CineLog</title>
<link rel="icon" type="image/svg+xml" href="/favicon.svg">
<style>
  :root{
    --bg:#0f1115; --panel:#16181d; --panel2:#111318; --muted:#9aa4b2; --fg:#f2f4f8;
    --border:#2a2d35; --danger:#f87171; --ok:#4ade80; --star:#facc15;
    --grad:linear-gradient(135deg,#9333ea,#2563eb);
  }
  *{box-sizing:border-box}
  body{margin:0;background:var(--bg);color:var(--fg);font:14px/1.5 ui-sans-serif,system-ui,Segoe UI,Roboto}
  .hidden{display:none !important}
  button{font:inherit;cursor:pointer;border-radius:12px;border:1px solid var(--border);background:#1f2229;color:var(--fg);padding:8px 14px}
  button.primary{background:var(--grad);border:0}
  button.danger{color:var(--danger);border-color:#7f1d1d66;background:#7f1d1d22}
  button.ghost{background:transparent;border:0;color:var(--muted)}
  input,textarea{width:100%;background:#0b0c10;border:1px solid var(--border);border-radius:12px;color:var(--fg);padding:10px 12px;font:inherit}
  label{font-size:11px;letter-spacing:.08em;text-transform:uppercase;color:var(--muted)}

  #welcome{min-height:100vh;display:flex;flex-direction:column;align-items:center;justify-content:center;text-align:center;gap:20px;padding:24px}
  #welcome h1{font-size:64px;margin:0;letter-spacing:-.04em}
  #welcome p{color:#cbd5e1;font-size:18px;max-width:460px}
  .logo{width:72px;height:72px;border-radius:22px;background:var(--grad)}

  header{position:sticky;top:0;z-index:5;display:flex;flex-wrap:wrap;gap:12px;align-items:center;justify-content:space-between;padding:16px 24px;background:#0f1115cc;backdrop-filter:blur(12px);border-bottom:1px solid #ffffff0d}
  header .brand h2{margin:0}
  header .brand small{color:var(--muted)}
  header .tools{display:flex;gap:8px;align-items:center}
  #search{width:220px}
  #sync-btn[data-status="syncing"]{color:#c084fc}
  #sync-btn[data-status="success"]{color:var(--ok)}
  #sync-btn[data-status="error"]{color:var(--danger)}

  main{max-width:1280px;margin:0 auto;padding:24px}
  .grid{display:grid;grid-template-columns:repeat(auto-fill,minmax(240px,1fr));gap:20px}
  .empty{border:2px dashed #1f2229;border-radius:24px;padding:80px 20px;text-align:center;color:var(--muted)}
  .card{background:var(--panel2);border:1px solid #1f2229;border-radius:16px;overflow:hidden;display:flex;flex-direction:column}
  .poster{position:relative;aspect-ratio:2/3;background:#1f2229}
  .poster img{width:100%;height:100%;object-fit:cover}
  .poster .year{position:absolute;top:10px;right:10px;background:#000a;border-radius:8px;padding:2px 8px;font-family:monospace;font-size:12px}
  .poster .meta{position:absolute;left:0;right:0;bottom:0;padding:14px;background:linear-gradient(transparent,#111318)}
  .poster h3{margin:0 0 2px}
  .stars{color:var(--star);letter-spacing:2px}
  .details{padding:14px;border-top:1px solid #ffffff0d;display:flex;flex-direction:column;gap:8px}
  .details .row{display:flex;justify-content:space-between;color:var(--muted);font-size:12px}
  .tag{display:inline-block;margin:0 4px 4px 0;padding:2px 8px;border-radius:6px;font-size:12px;color:#d8b4fe;background:#a855f71a;border:1px solid #a855f733}
  .review{font-style:italic;border-left:2px solid #a855f780;padding-left:10px;color:#d1d5db}
  .actions{display:flex;gap:8px}
  .actions button{flex:1;padding:6px}

  .modal{position:fixed;inset:0;z-index:10;background:#000c;display:flex;align-items:center;justify-content:center;padding:16px}
  .modal .box{background:var(--panel);border:1px solid var(--border);border-radius:18px;width:100%;max-width:520px;max-height:90vh;overflow:auto;padding:22px}
  .modal form{display:flex;flex-direction:column;gap:12px}
  .two{display:grid;grid-template-columns:1fr 1fr;gap:12px}
  .buttons{display:flex;gap:10px;justify-content:flex-end}
</style>
</head><body>

<section id="welcome" class="hidden">
  <div class="logo"></div>
  <h1>CineLog</h1>
  <p>The minimalist journal for the modern cinephile.<br>Curate your journey through world cinema.</p>
  <button class="primary" id="enter-btn">Enter Journal</button>
</section>

<section id="dashboard" class="hidden">
  <header>
    <div class="brand"><h2>CineLog</h2><small id="count">0 Films Watched</small></div>
    <div class="tools">
      <input id="search" type="search" placeholder="Search...">
      <button id="sync-btn" title="Sync now" data-status="idle">Sync</button>
      <button id="settings-btn" title="Sync settings">Settings</button>
      <button class="primary" id="add-btn">+ Log Movie</button>
    </div>
  </header>
  <main>
    <div id="empty" class="empty hidden"><h3>Library is empty</h3><p>Tap 'Log Movie' to start your collection</p></div>
    <div id="grid" class="grid"></div>
  </main>
</section>

<div id="entry-modal" class="modal hidden">
  <div class="box">
    <h2 id="entry-title">Log Movie</h2>
    <form id="entry-form">
      <div><label>Movie Title</label><input name="title" required placeholder="e.g. In the Mood for Love"></div>
      <div class="two">
        <div><label>Director</label><input name="director" required placeholder="Wong Kar-wai"></div>
        <div><label>Year</label><input name="year" type="number" required placeholder="2000"></div>
      </div>
      <div class="two">
        <div><label>Country</label><input name="country" required placeholder="Hong Kong"></div>
        <div><label>Date Watched</label><input name="dateWatched" type="date"></div>
      </div>
      <div><label>Poster URL</label><input name="image" placeholder="https://..."></div>
      <div><label>Rating <span id="rating-out">3</span>/5</label><input name="rating" type="range" min="1" max="5" value="3" required></div>
      <div><label>Tags</label><input name="tags" placeholder="Romance, Visuals"></div>
      <div><label>Review</label><textarea name="review" rows="3" required placeholder="Thoughts..."></textarea></div>
      <div class="buttons">
        <button type="button" data-close="entry-modal">Cancel</button>
        <button class="primary" type="submit">Save Entry</button>
      </div>
    </form>
  </div>
</div>

<div id="settings-modal" class="modal hidden">
  <div class="box">
    <h2>Sync Settings</h2>
    <p style="color:var(--muted)">Paste your spreadsheet Web App URL here to sync data across devices.</p>
    <form id="settings-form">
      <input name="cloud_url" placeholder="https://script.google.com/macros/s/...">
      <div class="buttons">
        <button type="button" class="ghost" data-close="settings-modal">Close</button>
        <button class="primary" type="submit">Connect</button>
      </div>
    </form>
  </div>
</div>

<script>
const API = "/api/v1";
const NO_IMAGE = "https://placehold.co/400x600/1a1a1a/666666?text=No+Image";
let movies = [];
let editingId = null;
let expandedId = null;
let statusTimer = null;

const $ = (id) => document.getElementById(id);

async function api(path, opts = {}) {
  const res = await fetch(API + path, {headers: {"content-type": "application/json"}, ...opts});
  if (!res.ok && res.status !== 204) throw new Error(res.status + " " + await res.text());
  return res.status === 204 ? null : res.json();
}

function esc(s) {
  const d = document.createElement("div");
  d.textContent = s == null ? "" : String(s);
  return d.innerHTML;
}

function stars(n) { return "★".repeat(n) + "☆".repeat(Math.max(0, 5 - n)); }

function showStatus(status) {
  const btn = $("sync-btn");
  btn.dataset.status = status;
  btn.textContent = {syncing: "Syncing…", success: "Synced", error: "Sync failed"}[status] || "Sync";
  clearTimeout(statusTimer);
  if (status !== "idle") statusTimer = setTimeout(refreshStatus, 700);
}

async function refreshStatus() {
  const s = await api("/sync/status");
  showStatus(s.status);
  if (s.status === "success") loadMovies();
}

async function loadMovies() {
  const q = $("search").value;
  movies = await api("/movies" + (q ? "?q=" + encodeURIComponent(q) : ""));
  const state = await api("/state");
  $("count").textContent = state.count + " Films Watched";
  render();
}

function render() {
  $("empty").classList.toggle("hidden", movies.length > 0);
  $("grid").innerHTML = movies.map((m) => `
    <div class="card">
      <div class="poster">
        <img src="${esc(m.image)}" alt="${esc(m.title)}" loading="lazy" onerror="this.src='${NO_IMAGE}'">
        <span class="year">${esc(m.year)}</span>
        <div class="meta"><h3>${esc(m.title)}</h3><div>${esc(m.director)}</div><div class="stars">${stars(m.rating)}</div></div>
      </div>
      <button class="ghost" data-toggle="${m.id}">${expandedId === m.id ? "Less" : "More"}</button>
      <div class="details ${expandedId === m.id ? "" : "hidden"}">
        <div class="row"><span>${esc(m.country)}</span><span>${esc(m.dateWatched)}</span></div>
        <div>${m.tags.map((t) => `<span class="tag">${esc(t)}</span>`).join("")}</div>
        <p class="review">"${esc(m.review)}"</p>
        <div class="actions">
          <button data-edit="${m.id}">Edit</button>
          <button class="danger" data-delete="${m.id}">Delete</button>
        </div>
      </div>
    </div>`).join("");
}

function openEntry(movie) {
  editingId = movie ? movie.id : null;
  $("entry-title").textContent = movie ? "Edit Entry" : "Log Movie";
  const f = $("entry-form");
  f.reset();
  if (movie) {
    for (const k of ["title", "director", "year", "country", "dateWatched", "image", "review", "rating"]) {
      f.elements[k].value = movie[k] ?? "";
    }
    f.elements.tags.value = (movie.tags || []).join(", ");
  }
  $("rating-out").textContent = f.elements.rating.value;
  $("entry-modal").classList.remove("hidden");
}

async function saveEntry(ev) {
  ev.preventDefault();
  const body = Object.fromEntries(new FormData(ev.target).entries());
  body.rating = parseInt(body.rating, 10);
  if (editingId) {
    await api("/movies/" + editingId, {method: "PATCH", body: JSON.stringify(body)});
  } else {
    await api("/movies", {method: "POST", body: JSON.stringify(body)});
  }
  $("entry-modal").classList.add("hidden");
  editingId = null;
  await loadMovies();
  refreshStatus();
}

async function removeEntry(id) {
  if (!confirm("Delete this entry permanently?")) return;
  await api("/movies/" + id + "?confirm=true", {method: "DELETE"});
  await loadMovies();
  refreshStatus();
}

async function saveSettings(ev) {
  ev.preventDefault();
  const cloud_url = ev.target.elements.cloud_url.value;
  await api("/settings/cloud", {method: "PUT", body: JSON.stringify({cloud_url})});
  $("settings-modal").classList.add("hidden");
  refreshStatus();
}

async function syncNow() {
  showStatus("syncing");
  const res = await api("/sync/pull", {method: "POST"});
  showStatus(res.status);
  await loadMovies();
}

async function showView(view) {
  $("welcome").classList.toggle("hidden", view !== "welcome");
  $("dashboard").classList.toggle("hidden", view !== "app");
  if (view === "app") await loadMovies();
}

document.addEventListener("click", async (ev) => {
  const t = ev.target;
  if (t.dataset.close) $(t.dataset.close).classList.add("hidden");
  if (t.dataset.toggle) { const id = Number(t.dataset.toggle); expandedId = expandedId === id ? null : id; render(); }
  if (t.dataset.edit) openEntry(movies.find((m) => m.id === Number(t.dataset.edit)));
  if (t.dataset.delete) removeEntry(Number(t.dataset.delete));
});

$("enter-btn").onclick = async () => { const s = await api("/session/enter", {method: "POST"}); await showView(s.view); refreshStatus(); };
$("add-btn").onclick = () => openEntry(null);
$("sync-btn").onclick = syncNow;
$("settings-btn").onclick = async () => {
  const s = await api("/settings/cloud");
  $("settings-form").elements.cloud_url.value = s.cloud_url;
  $("settings-modal").classList.remove("hidden");
};
$("search").oninput = loadMovies;
$("entry-form").onsubmit = saveEntry;
$("entry-form").elements.rating.oninput = (ev) => { $("rating-out").textContent = ev.target.value; };
$("settings-form").onsubmit = saveSettings;

api("/state").then((s) => { showView(s.view); showStatus(s.sync_status); });
</script>
</body></html>"""
