# Routes package init
"""
Inkpost Backend — API Routes Package
======================================

Route Inventory:
    - posts.py:   POST   /posts          (create)
                  GET    /posts?term=    (list / search)
                  GET    /posts/{id}     (get)
                  PUT    /posts/{id}     (full replace)
                  DELETE /posts/{id}     (delete)
    - health.py:  GET    /health         (service health check)

Routes stay thin: extract input, call PostService, set the status code.
"""
