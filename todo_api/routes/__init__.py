# Routes package init
"""
Todo API — Routes Package
===========================

Route Inventory:
    - todos.py:   GET/POST /todos, GET/PUT/DELETE /todos/{id}
    - health.py:  GET /health

Routes are thin: they call the store and turn its result into a status code.
"""
