from tubesight.bootstrap.components import Components
from tubesight.components.configuration.settings import Settings


def get_components(
        env: str = 'development',
        settings: Settings | None = None
) -> Components:
    return Components(env, settings)
