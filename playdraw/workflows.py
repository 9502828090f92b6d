from typing import TYPE_CHECKING, Optional

from sqlalchemy.orm import Session, sessionmaker

from .catalog import JsonCatalogLoader, SqlCatalogLoader
from .config import DrawConfig, load_config
from .draw.sampler import DrawResult
from .draw.service import DailyPlaytimeDrawService
from .players import SqlPlayerRecordStore

if TYPE_CHECKING:
    from .collaborators import CatalogLoader, DeliveryService
    from .rng import RandomSource


def build_draw_service(
    player_id: str,
    nickname: str,
    *,
    session_factory: "sessionmaker[Session]",
    config: Optional[DrawConfig] = None,
    delivery: Optional["DeliveryService"] = None,
    catalog_loader: Optional["CatalogLoader"] = None,
    rng: Optional["RandomSource"] = None,
) -> DailyPlaytimeDrawService:
    """Wire a :class:`DailyPlaytimeDrawService` to the bundled adapters.

    Playtime is read through :class:`SqlPlayerRecordStore`. Unless
    ``catalog_loader`` is given, the drop table comes from JSON files when
    ``config.catalog_dir`` is set and from the database otherwise. Unless
    ``delivery`` is given, rewards are posted with a
    :class:`~playdraw.delivery.api.GiftBoxClient`.

    Parameters
    ----------
    player_id : str
        Player's in-app id.
    nickname : str
        Player's display name.
    session_factory : sessionmaker[Session]
        Factory for sessions on the player database.
    config : Optional[DrawConfig]
        Configuration; loaded from the environment when omitted.
    delivery : Optional[DeliveryService]
        Delivery collaborator override.
    catalog_loader : Optional[CatalogLoader]
        Catalog collaborator override.
    rng : Optional[RandomSource]
        Random source override, e.g. a seeded one for replays.

    Returns
    -------
    DailyPlaytimeDrawService
        A service whose drop table has already been loaded.
    """
    if config is None:
        config = load_config()

    if catalog_loader is None:
        if config.catalog_dir:
            catalog_loader = JsonCatalogLoader(config.catalog_dir)
        else:
            catalog_loader = SqlCatalogLoader(session_factory)

    if delivery is None:
        from .delivery.api import GiftBoxClient

        delivery = GiftBoxClient(
            base_url=config.giftbox_base_url, token=config.giftbox_token
        )

    return DailyPlaytimeDrawService(
        player_id,
        nickname,
        player_store=SqlPlayerRecordStore(session_factory),
        catalog_loader=catalog_loader,
        delivery=delivery,
        config=config,
        rng=rng,
    )


async def draw_and_claim(
    service: DailyPlaytimeDrawService, nickname: Optional[str] = None
) -> Optional[DrawResult]:
    """Draw for the service's player and, if something dropped, claim it.

    The workflow performs two steps:

    1. Run :meth:`DailyPlaytimeDrawService.draw`.
    2. When an item dropped, forward it with
       :meth:`DailyPlaytimeDrawService.claim_reward` under ``nickname``
       (defaulting to the service's player nickname).

    Errors from either step propagate. Nothing records that the draw happened,
    so callers that want one draw per day must track that themselves.

    Returns
    -------
    Optional[DrawResult]
        The claimed item, or ``None`` when nothing dropped.
    """
    result = await service.draw()
    if result is None:
        return None
    await service.claim_reward(result, nickname or service.player_nickname)
    return result
