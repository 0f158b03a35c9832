# Routes package init
"""
IdeaBoard Backend: API Routes Package
=======================================

Route Inventory:
    - ideas.py:   GET    /ideas                  (latest ideas with likes)
                  POST   /ideas                  (create an idea)
                  GET    /ideas/{id}             (one idea with likes)
                  DELETE /ideas/{id}             (delete an idea)
    - likes.py:   GET    /ideas/{id}/likes       (likes of an idea)
                  POST   /ideas/{id}/likes       (plus one)
                  DELETE /ideas/{id}/likes       (minus one: newest like)
    - health.py:  GET    /health                 (service health check)
    - responses.py: shared 204 No Content helper

Routes stay thin: they pick status codes and attach likes to ideas; the
rules live in the services.
"""
