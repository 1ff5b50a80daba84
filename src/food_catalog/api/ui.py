"""Browser UI that consumes the foods API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def catalog_ui() -> HTMLResponse:
    """Single-page catalog UI: list, search, create, edit and delete."""
    return HTMLResponse(_CATALOG_UI_HTML)


_CATALOG_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Food Catalog</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; width: 240px; margin: 0 0.5rem 0.5rem 0; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      button:disabled { opacity: 0.5; cursor: not-allowed; }
      .grid { display: grid; grid-template-columns: repeat(auto-fill, 240px); gap: 1rem; }
      .card { border: 1px solid #ddd; border-radius: 8px; padding: 0.8rem; }
      .list .card { margin-bottom: 0.5rem; }
      .category { color: #555; font-size: 0.85rem; }
      #toasts { position: fixed; top: 1rem; right: 1rem; }
      .toast { color: #fff; padding: 0.6rem 1rem; border-radius: 8px; margin-bottom: 0.5rem; }
      .toast.success { background: #16a34a; }
      .toast.error { background: #dc2626; }
      .toast.warning { background: #d97706; }
    </style>
  </head>
  <body>
    <h1>Food Catalog</h1>
    <div id="toasts"></div>
    <form id="food-form" class="row">
      <input id="name" placeholder="Name" required />
      <input id="price" type="number" step="0.01" min="0" placeholder="Price" required />
      <input id="category" placeholder="Category" required />
      <input id="description" placeholder="Description" required />
      <br />
      <button id="submit" type="submit">Add food</button>
      <button id="cancel" type="button" style="display: none">Cancel</button>
    </form>
    <div class="row">
      <input id="search" placeholder="Search foods" />
      <button type="button" onclick="setViewMode('grid')">Grid</button>
      <button type="button" onclick="setViewMode('list')">List</button>
      <span id="count"></span>
    </div>
    <div id="foods">Loading...</div>
    <script>
      const FIELDS = ['name', 'price', 'category', 'description'];
      let foods = [];
      let editingFood = null;
      let isSubmitting = false;
      let viewMode = 'list';
      const deletingIds = new Set();

      function toast(kind, message) {
        const el = document.createElement('div');
        el.className = 'toast ' + kind;
        el.textContent = message;
        el.onclick = () => el.remove();
        document.getElementById('toasts').appendChild(el);
        setTimeout(() => el.remove(), 5000);
      }

      function filteredFoods() {
        const term = document.getElementById('search').value.toLowerCase();
        return foods.filter(food =>
          food.name.toLowerCase().includes(term) ||
          food.category.toLowerCase().includes(term) ||
          food.description.toLowerCase().includes(term)
        );
      }

      function render() {
        const visible = filteredFoods();
        document.getElementById('count').textContent =
          visible.length + (visible.length === 1 ? ' item' : ' items');
        const container = document.getElementById('foods');
        container.className = viewMode;
        container.innerHTML = '';
        if (visible.length === 0) {
          container.textContent = 'No foods found.';
          return;
        }
        for (const food of visible) {
          const busy = isSubmitting || deletingIds.has(food._id);
          const card = document.createElement('div');
          card.className = 'card';
          const title = document.createElement('strong');
          title.textContent = food.name + ' - $' + Number(food.price).toFixed(2);
          const category = document.createElement('div');
          category.className = 'category';
          category.textContent = food.category;
          const description = document.createElement('p');
          description.textContent = food.description;
          const edit = document.createElement('button');
          edit.textContent = 'Edit';
          edit.disabled = busy;
          edit.onclick = () => editFood(food);
          const remove = document.createElement('button');
          remove.textContent = deletingIds.has(food._id) ? 'Deleting...' : 'Delete';
          remove.disabled = busy;
          remove.onclick = () => deleteFood(food._id);
          card.append(title, category, description, edit, remove);
          container.appendChild(card);
        }
      }

      function setViewMode(mode) {
        viewMode = mode;
        render();
      }

      function setFormDisabled(disabled) {
        for (const field of FIELDS) {
          document.getElementById(field).disabled = disabled;
        }
        document.getElementById('submit').disabled = disabled;
        document.getElementById('cancel').disabled = disabled;
      }

      function resetForm() {
        for (const field of FIELDS) {
          document.getElementById(field).value = '';
        }
        editingFood = null;
        document.getElementById('submit').textContent = 'Add food';
        document.getElementById('cancel').style.display = 'none';
      }

      function editFood(food) {
        editingFood = food;
        for (const field of FIELDS) {
          document.getElementById(field).value = food[field];
        }
        document.getElementById('submit').textContent = 'Update food';
        document.getElementById('cancel').style.display = 'inline';
      }

      function errorMessage(result, fallback) {
        if (result && result.error === 'Database not configured') {
          return result.message;
        }
        return fallback;
      }

      async function loadFoods() {
        try {
          const res = await fetch('/foods');
          const data = await res.json();
          if (Array.isArray(data)) {
            foods = data;
          } else {
            foods = [];
            toast('error', errorMessage(data, 'Failed to load foods'));
          }
        } catch (error) {
          foods = [];
          toast('error', 'Connection error. Please check your database configuration.');
        }
        render();
      }

      async function submitForm(event) {
        event.preventDefault();
        const body = {
          name: document.getElementById('name').value,
          price: Number(document.getElementById('price').value),
          category: document.getElementById('category').value,
          description: document.getElementById('description').value,
        };
        const url = editingFood ? '/foods/' + editingFood._id : '/foods';
        const method = editingFood ? 'PUT' : 'POST';
        isSubmitting = true;
        setFormDisabled(true);
        render();
        try {
          const res = await fetch(url, {
            method: method,
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(body),
          });
          const result = await res.json();
          if (res.ok) {
            toast('success', editingFood ? 'Food updated successfully!' : 'Food added successfully!');
            resetForm();
            loadFoods();
          } else {
            toast('error', errorMessage(result, 'Failed to save food'));
          }
        } catch (error) {
          toast('error', 'Connection error. Please check your database configuration.');
        } finally {
          isSubmitting = false;
          setFormDisabled(false);
          render();
        }
      }

      async function deleteFood(id) {
        deletingIds.add(id);
        render();
        try {
          const res = await fetch('/foods/' + id, { method: 'DELETE' });
          if (res.ok) {
            toast('success', 'Food deleted successfully!');
            loadFoods();
          } else {
            toast('error', 'Failed to delete food');
          }
        } catch (error) {
          toast('error', 'Connection error. Please check your database configuration.');
        } finally {
          deletingIds.delete(id);
          render();
        }
      }

      document.getElementById('food-form').addEventListener('submit', submitForm);
      document.getElementById('cancel').addEventListener('click', resetForm);
      document.getElementById('search').addEventListener('input', render);
      loadFoods();
    </script>
  </body>
</html>
"""
