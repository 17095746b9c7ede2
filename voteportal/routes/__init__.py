from voteportal.routes.public import register_public_routes


def register_routes(app):
    register_public_routes(app)
