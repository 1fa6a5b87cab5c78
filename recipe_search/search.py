"""
Search executor that runs one recipe lookup per user action.

This module provides the request/filter/state flow behind the search form:
- Ignores blank ingredient text (no state change, no request)
- Moves to Loading and calls the connector exactly once
- Filters a non-empty response with the criteria the search was issued with
- Maps empty responses and service faults to the two user-facing failure messages
- Notifies listeners on every state transition so the UI can redraw

Search flow: Streamlit form -> SearchExecutor.search() -> connector.search_by_ingredient()
-> RecipeSummary list -> filter_recipes() -> SearchResultState

Every search takes a request sequence number. When searches overlap, only the
response to the most recently issued one is applied; older responses are dropped,
even when they arrive later. The last issued search wins, not the last response
to arrive.
"""

import itertools
import logging
from typing import Callable, List, Optional

from recipe_search.connectors.base import BaseConnector, RecipeServiceError
from recipe_search.connectors.mealdb_connector import MealDBConnector
from recipe_search.filters import filter_recipes
from recipe_search.models import (
    NO_RESULTS_MESSAGE,
    REQUEST_FAILED_MESSAGE,
    SearchCriteria,
    SearchResultState,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[SearchResultState], None]


class SearchExecutor:
    """
    Holds the current SearchResultState for one browser session and runs searches.

    The connector is created lazily so that constructing an executor never
    touches configuration or the network.
    """

    def __init__(self, connector: Optional[BaseConnector] = None) -> None:
        self._connector = connector
        self._state = SearchResultState.idle()
        self._listeners: List[StateListener] = []
        self._sequence = itertools.count(1)
        self._latest_request = 0

    @property
    def connector(self) -> BaseConnector:
        if self._connector is None:
            self._connector = MealDBConnector()
        return self._connector

    @property
    def state(self) -> SearchResultState:
        return self._state

    @property
    def latest_request(self) -> int:
        """Sequence number of the most recently issued search (0 before the first)."""
        return self._latest_request

    def add_listener(self, listener: StateListener) -> None:
        """Register a callback invoked with every new state."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def clear_listeners(self) -> None:
        self._listeners.clear()

    def reset(self) -> None:
        """Forget any results and return to Idle."""
        self._set_state(SearchResultState.idle())

    def search(self, criteria: SearchCriteria) -> SearchResultState:
        """
        Run a search for the given criteria.

        Args:
            criteria: Ingredient text and filters as they are at submit time

        Returns:
            The resulting state. For blank ingredient text this is the
            unchanged current state.
        """
        query = criteria.query
        if not query:
            logger.debug("Ignoring search with blank ingredient text")
            return self._state

        request_id = next(self._sequence)
        self._latest_request = request_id
        self._set_state(SearchResultState.loading(criteria))

        result = self._fetch(query, criteria)

        if request_id != self._latest_request:
            logger.info(
                "Discarding stale response for request %d (latest is %d)",
                request_id,
                self._latest_request,
            )
            return self._state

        self._set_state(result)
        return result

    def _fetch(self, query: str, criteria: SearchCriteria) -> SearchResultState:
        try:
            recipes = self.connector.search_by_ingredient(query)
        except RecipeServiceError as e:
            logger.error("Recipe search failed for ingredient=%r: %s", query, e, exc_info=True)
            return SearchResultState.failure(REQUEST_FAILED_MESSAGE, criteria)
        except Exception as e:
            logger.error("Unexpected error searching ingredient=%r: %s", query, e, exc_info=True)
            return SearchResultState.failure(REQUEST_FAILED_MESSAGE, criteria)

        if not recipes:
            logger.info("No recipes found for ingredient=%r", query)
            return SearchResultState.failure(NO_RESULTS_MESSAGE, criteria)

        filtered = filter_recipes(recipes, criteria.diet_filter, criteria.time_filter)
        logger.info(
            "Search for ingredient=%r: %d recipes, %d after filters (diet=%s, time=%s)",
            query,
            len(recipes),
            len(filtered),
            criteria.diet_filter.value,
            criteria.time_filter.value,
        )
        return SearchResultState.success(filtered, criteria)

    def _set_state(self, state: SearchResultState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
