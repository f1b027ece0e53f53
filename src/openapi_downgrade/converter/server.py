from openapi_downgrade.model import v3_0, v3_1


def downgrade_server(server: v3_1.Server) -> v3_0.Server:
    """Convert a server; an empty variable mapping becomes absent."""
    return v3_0.Server(
        url=server.url,
        description=server.description,
        variables=dict(server.variables) if server.variables else None,
        extensions=server.extensions,
    )
