"""
Quick demo script to run the parts catalog API locally.

Requires SUPABASE_URL and SUPABASE_ANON_KEY in the environment or in .env.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Parts Catalog Backend Demo")
    print("=" * 60)
    print()
    print("API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Parts:         GET  http://localhost:8000/parts?category=Brakes&search=pad")
    print("   - Categories:    GET  http://localhost:8000/parts/categories")
    print("   - Register:      POST http://localhost:8000/users/register")
    print("   - Cart:          GET  http://localhost:8000/users/<user_id>/cart")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print("Test with curl:")
    print('   curl -X POST "http://localhost:8000/users/<user_id>/cart" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"part_id": "<part_id>", "quantity": 2}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "catalog.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
