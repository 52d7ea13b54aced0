import logging
import re
from typing import Callable, Optional, Tuple

from aws_cdk import aws_apigateway as apigw
from constructs import Construct

from .errors import EmptyPathError, NotFoundError, UnregisteredPathError
from .resource_builder import ApiResourceBuilder

logger = logging.getLogger(__name__)

ROOT_PATH = "/"

ResourceBuilderStrategy = Callable[[str], ApiResourceBuilder]


def path_segments(path: str) -> list:
    return [segment for segment in path.split("/") if segment]


def normalize_path(path: str) -> str:
    """'users//{id}/' -> '/users/{id}'. Paths without segments map to the root."""
    return ROOT_PATH + "/".join(path_segments(path))


class ApiGatewayConstruct(Construct):
    """
    Construct to build and configure an API Gateway REST API.

    Resources are addressed by path. Asking for '/a/b/c' creates '/a' and
    '/a/b' as well when they do not exist yet, every created resource is
    remembered so the same path always gives back the same builder.
    """

    def __init__(self, scope: Construct, id: str, **rest_api_props):
        super().__init__(scope, id)

        # ApiGateway instance
        self._api = apigw.RestApi(self, id, **rest_api_props)
        # path -> builder
        self._resource_builders = {}
        self.root()

    @property
    def api(self) -> apigw.RestApi:
        return self._api

    @property
    def root_url(self) -> str:
        return self._api.url

    @property
    def paths(self) -> Tuple[str, ...]:
        return tuple(self._resource_builders)

    def __contains__(self, path: str) -> bool:
        key = normalize_path(path)
        if key == ROOT_PATH and path != ROOT_PATH:
            return False
        return key in self._resource_builders

    def resolve(self, path: str, resource_builder: Optional[ResourceBuilderStrategy] = None) -> ApiResourceBuilder:
        """
        Creates or simply returns the builder of the specified resource.

        :param path: resource path, '/' being the root
        :param resource_builder: strategy called with the normalized path when
            it is not known yet. It must register the builder of that path
            (and of the ancestors it creates). Defaults to the segment walker.
        """
        # Returns the root if path is just '/'
        if path == ROOT_PATH:
            return self.root()

        key = self._cache_key(path)
        if key not in self._resource_builders:
            (resource_builder or self._default_resource_builder)(key)

        try:
            return self._resource_builders[key]
        except KeyError:
            raise UnregisteredPathError(f"Resource builder did not register path {key}") from None

    def register(self, path: str, builder: ApiResourceBuilder) -> ApiResourceBuilder:
        """Caches ``builder`` under ``path``, for custom resource builder strategies."""
        self._resource_builders[self._cache_key(path)] = builder
        return builder

    def url_for(self, path: str) -> str:
        key = self._cache_key(path)
        if key not in self._resource_builders:
            raise NotFoundError(f"Fail to find resource with path {path}")
        return self._api.url_for_path(key)

    def root(self) -> ApiResourceBuilder:
        """Returns a new builder of the root resource, replacing the cached one."""
        return self.register(ROOT_PATH, ApiResourceBuilder(self, self._api.root))

    def function_id(self, path: str, http_method: str) -> str:
        """Construct id of the function backing ``http_method`` on ``path``."""
        name = "".join(
            cleaned[:1].upper() + cleaned[1:]
            for cleaned in (re.sub(r"[^0-9A-Za-z]", "", segment) for segment in path_segments(path))
        ) or "Root"
        base = f"{name}{http_method.upper()}Handler"
        candidate, count = base, 1
        while self.node.try_find_child(candidate) is not None:
            count += 1
            candidate = f"{base}{count}"
        return candidate

    def _cache_key(self, path: str) -> str:
        """Normalized path. Only '/' itself names the root, '' or '//' are empty paths."""
        key = normalize_path(path)
        if key == ROOT_PATH and path != ROOT_PATH:
            raise EmptyPathError(f"Path {path!r} has no resource segment")
        return key

    def _default_resource_builder(self, path: str) -> ApiResourceBuilder:
        segments = path_segments(path)
        if not segments:
            raise EmptyPathError(f"Path {path!r} has no resource segment")

        parent = self._api.root
        builder = None
        for depth, segment in enumerate(segments, start=1):
            resource_path = ROOT_PATH + "/".join(segments[:depth])
            builder = self._resource_builders.get(resource_path)

            # Adds new resource when builder not found
            if builder is None:
                builder = self.register(resource_path, ApiResourceBuilder(self, parent.add_resource(segment)))
                logger.debug("Created resource %s", resource_path)
            parent = builder.resource

        return builder
