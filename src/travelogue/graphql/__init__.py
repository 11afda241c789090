"""GraphQL API for albums, pictures, blog posts and countries."""
