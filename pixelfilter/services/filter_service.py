"""
Filter Service - Runs named filter operations and shape analysis.

This service is the parameterized entry point over the filter and
analysis modules: it resolves operation names, fills in configured
defaults, validates parameters and times each operation.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Type, Union

from pixelfilter.analysis.moments import central_moments, centroid, eigen, invariants, moment
from pixelfilter.analysis.shape import area, perimeter
from pixelfilter.config import Settings, get_settings
from pixelfilter.core.constants import ErrorMessages
from pixelfilter.core.enums import FilterOperation
from pixelfilter.core.exceptions import InvalidParameterError
from pixelfilter.core.surface import Surface
from pixelfilter.core.utils.decorators import timer
from pixelfilter.core.utils.enum_converter import enum_to_string, parse_enum
from pixelfilter.core.utils.params_processor import merge_params, params_to_dict, prepare_params
from pixelfilter.filters.morphology import dilate, erode
from pixelfilter.filters.neighborhood import laplacian, smooth_mean, smooth_median, sobel_gradient
from pixelfilter.filters.point import color_mask, equalize_histogram, invert, threshold
from pixelfilter.schemas import (
    BaseFilterParams,
    ColorMaskParams,
    EdgeParams,
    FilterResult,
    FilterStep,
    MorphologyParams,
    ParamsInput,
    ShapeDescriptor,
    ThresholdParams,
)

logger = logging.getLogger(__name__)


class FilterService:
    """
    Service for applying filter operations to surfaces.

    Operations can be given as FilterOperation members or as
    case-insensitive names ("sobel", "Erode", ...).
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize filter service.

        Args:
            settings: Settings providing operation defaults; defaults to get_settings()
        """
        self.settings = settings or get_settings()

    def apply(
        self,
        surface: Surface,
        operation: Union[FilterOperation, str],
        params: ParamsInput = None,
    ) -> FilterResult:
        """
        Apply one operation to a surface in place.

        Args:
            surface: Surface to modify
            operation: Operation to run
            params: Operation parameters (dict or params model); None uses defaults

        Returns:
            FilterResult with the effective parameters and processing time

        Raises:
            InvalidParameterError: If the operation is unknown
            pydantic.ValidationError: If the parameters are invalid
        """
        op = self._resolve_operation(operation)

        try:
            with timer() as t:
                used_params = self._dispatch(surface, op, params)
        except Exception as e:
            logger.error(f"Operation {enum_to_string(op)} failed: {e}")
            raise

        result = FilterResult(
            operation=op,
            params=params_to_dict(used_params),
            width=surface.width(),
            height=surface.height(),
            processing_time_ms=t["ms"],
        )
        logger.debug(
            f"Applied {enum_to_string(op)} to {result.width}x{result.height} surface "
            f"in {result.processing_time_ms:.2f} ms"
        )
        return result

    def run_pipeline(
        self, surface: Surface, steps: Iterable[Union[FilterStep, Dict[str, Any]]]
    ) -> List[FilterResult]:
        """
        Apply a sequence of operations in order.

        Args:
            surface: Surface to modify
            steps: FilterStep instances or dicts with "operation" and optional "params"

        Returns:
            One FilterResult per step
        """
        results = []
        for step in steps:
            if not isinstance(step, FilterStep):
                step = FilterStep.model_validate(step)
            results.append(self.apply(surface, step.operation, step.params))

        logger.info(f"Pipeline of {len(results)} steps completed")
        return results

    def describe_shape(self, surface: Surface) -> ShapeDescriptor:
        """
        Compute every shape statistic of a surface.

        Statistics that need ink (centroid, central moments, invariants,
        eigen) are left as None when the surface is all white.

        Args:
            surface: Surface to measure (not modified)

        Returns:
            ShapeDescriptor
        """
        with timer() as t:
            moments = moment(surface)
            descriptor = {
                "area": area(surface),
                "perimeter": perimeter(surface),
                "moments": moments,
            }

            if moments.m00 == 0:
                logger.warning("Surface has zero mass; skipping moment-based descriptors")
            else:
                center = centroid(moments)
                central = central_moments(moments, center)
                descriptor.update(
                    centroid=center,
                    central_moments=central,
                    invariants=invariants(central),
                    eigen=eigen(moments, center),
                )

        logger.debug(f"Shape described in {t['ms']:.2f} ms")
        return ShapeDescriptor(**descriptor)

    def _resolve_operation(self, operation: Union[FilterOperation, str]) -> FilterOperation:
        op = parse_enum(operation, FilterOperation, normalize=True)
        if op is None:
            raise InvalidParameterError(
                ErrorMessages.UNKNOWN_OPERATION.format(operation=operation)
            )
        return op

    def _prepare(
        self,
        params: ParamsInput,
        params_class: Type[BaseFilterParams],
        defaults: Dict[str, Any],
    ) -> BaseFilterParams:
        """Validate params on top of configured defaults."""
        if isinstance(params, params_class):
            return params
        if isinstance(params, BaseFilterParams):
            params = params.model_dump()
        return prepare_params(merge_params(defaults, params or {}), params_class)

    def _dispatch(
        self, surface: Surface, op: FilterOperation, params: ParamsInput
    ) -> Optional[BaseFilterParams]:
        """Run the operation; returns the effective params model, if any."""
        filters = self.settings.filters

        if op == FilterOperation.COLOR_MASK:
            mask_params = self._prepare(params, ColorMaskParams, {})
            color_mask(surface, mask_params.channels)
            return mask_params

        elif op == FilterOperation.THRESHOLD:
            threshold_params = self._prepare(
                params, ThresholdParams, {"level": filters.threshold_level}
            )
            threshold(surface, threshold_params.level)
            return threshold_params

        elif op in (FilterOperation.SOBEL, FilterOperation.LAPLACIAN):
            edge_params = self._prepare(params, EdgeParams, {})
            clamp = edge_params.clamp
            if clamp is None:
                clamp = filters.clamp_edge_response
            edge_params = edge_params.model_copy(update={"clamp": clamp})

            if op == FilterOperation.SOBEL:
                sobel_gradient(surface, clamp=clamp)
            else:
                laplacian(surface, clamp=clamp)
            return edge_params

        elif op in (FilterOperation.ERODE, FilterOperation.DILATE):
            morph_params = self._prepare(
                params, MorphologyParams, {"iterations": filters.morphology_iterations}
            )
            if op == FilterOperation.ERODE:
                erode(surface, morph_params.iterations)
            else:
                dilate(surface, morph_params.iterations)
            return morph_params

        if params:
            logger.warning(f"Operation {enum_to_string(op)} takes no parameters; ignoring {params}")

        if op == FilterOperation.INVERT:
            invert(surface)
        elif op == FilterOperation.EQUALIZE:
            equalize_histogram(surface)
        elif op == FilterOperation.SMOOTH_MEAN:
            smooth_mean(surface)
        elif op == FilterOperation.SMOOTH_MEDIAN:
            smooth_median(surface)
        else:
            raise InvalidParameterError(ErrorMessages.UNKNOWN_OPERATION.format(operation=op))

        return None
