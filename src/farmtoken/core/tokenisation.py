from __future__ import annotations

import concurrent.futures
import logging
import threading
from dataclasses import dataclass

from ..ledger.gateway import GatewayError, LedgerGateway, OperatorIdentity, TokenSpec
from .errors import NotFoundError, TokenisationError
from .farms import FarmRecord
from .registry import FarmRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenisationResult:
    record: FarmRecord
    external_token_id: str
    already_tokenised: bool = False


class TokenisationCoordinator:
    """Drives the registered -> tokenised transition for one farm per call.

    The gateway is called at most once per successful transition:
    - calls for the same farm are serialised through `FarmRegistry.record_lock`,
      so a concurrent caller sees the committed token id and returns early;
    - the registry-wide lock is never held across the gateway call;
    - the registry is only written after the gateway returned a token id.
    """

    def __init__(
        self,
        registry: FarmRegistry,
        gateway: LedgerGateway,
        operator: OperatorIdentity,
        *,
        timeout_s: float | None = None,
    ) -> None:
        if timeout_s is not None and float(timeout_s) <= 0:
            raise ValueError("timeout_s must be a positive number")
        self._registry = registry
        self._gateway = gateway
        self._operator = operator
        self._timeout_s = float(timeout_s) if timeout_s is not None else None

    def token_spec_for(self, farm: FarmRecord) -> TokenSpec:
        quantity = farm.issuance_quantity
        return TokenSpec(
            name=farm.token_name,
            symbol=farm.token_symbol,
            initial_supply=quantity,
            max_supply=quantity,
            issuer=self._operator,
            supply_type="finite",
        )

    def tokenise(self, farm_id: str) -> TokenisationResult:
        if self._registry.find(farm_id) is None:
            raise NotFoundError(f"Farm not found: {farm_id}")

        with self._registry.record_lock(farm_id):
            farm = self._registry.get(farm_id)
            # mark_tokenised sets the token id and status together.
            if farm.external_token_id is not None:
                return TokenisationResult(farm, farm.external_token_id, already_tokenised=True)

            spec = self.token_spec_for(farm)
            logger.info("Creating token for farm %s with supply %d", farm.id, spec.initial_supply)
            token_id = self._create_asset(farm, spec)

            updated = self._registry.mark_tokenised(farm.id, token_id)
            logger.info("Created token %s for farm %s", token_id, farm.id)
            return TokenisationResult(updated, token_id)

    def _create_asset(self, farm: FarmRecord, spec: TokenSpec) -> str:
        try:
            if self._timeout_s is None:
                token_id = self._gateway.create_fungible_asset(spec)
            else:
                token_id = self._create_asset_with_timeout(farm, spec, self._timeout_s)
        except TokenisationError:
            raise
        except GatewayError as ex:
            logger.warning("Ledger rejected token for farm %s: %s", farm.id, ex)
            raise TokenisationError("Failed to tokenise farm", cause=ex) from ex
        except Exception as ex:
            logger.exception("Unexpected ledger failure for farm %s", farm.id)
            raise TokenisationError("Failed to tokenise farm", cause=ex) from ex

        token_id = str(token_id or "").strip()
        if not token_id:
            raise TokenisationError("Ledger returned no token id", cause=GatewayError("empty token id"))
        return token_id

    def _create_asset_with_timeout(self, farm: FarmRecord, spec: TokenSpec, timeout_s: float) -> str:
        future: concurrent.futures.Future[str] = concurrent.futures.Future()

        def _call() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                future.set_result(self._gateway.create_fungible_asset(spec))
            except BaseException as ex:
                future.set_exception(ex)

        # Daemon thread: an abandoned ledger call never holds up process exit.
        thread = threading.Thread(target=_call, name=f"farmtoken-ledger-{farm.id}", daemon=True)
        thread.start()

        done, _ = concurrent.futures.wait([future], timeout=timeout_s)
        if not done:
            # The worker keeps running; its result is dropped.
            logger.warning("Ledger call for farm %s timed out after %.1fs", farm.id, timeout_s)
            raise TokenisationError(
                f"Ledger call timed out after {timeout_s:g}s; "
                "the token may still be created on the ledger without being linked to this farm",
                cause=TimeoutError(f"no ledger response within {timeout_s:g}s"),
            )
        return future.result()
