"""
ShowdownService - 摊牌服务

为游戏流程层提供摊牌结算入口：评估每位玩家的最佳牌型并找出获胜者。
不处理底池分配。
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..core.deck.card import Card
from ..core.eval.comparator import find_winners
from ..core.eval.evaluator import HandEvaluator
from ..core.eval.types import HandEvaluation
from .config_service import ConfigService
from .types import NO_PLAYERS, InvalidCardError, QueryResult, ValidationError

__all__ = ['ShowdownResult', 'ShowdownService']


@dataclass(frozen=True)
class ShowdownResult:
    """摊牌结果"""
    evaluations: Dict[str, HandEvaluation]
    winner_ids: Tuple[str, ...]

    @property
    def is_tie(self) -> bool:
        """是否多人并列获胜"""
        return len(self.winner_ids) > 1

    @property
    def winning_evaluation(self) -> Optional[HandEvaluation]:
        """获胜牌型"""
        if not self.winner_ids:
            return None
        return self.evaluations[self.winner_ids[0]]


class ShowdownService:
    """摊牌服务"""

    def __init__(self, evaluator: Optional[HandEvaluator] = None,
                 config_service: Optional[ConfigService] = None,
                 profile: str = "default"):
        """
        初始化摊牌服务

        Args:
            evaluator: 牌型评估器，为None时按配置创建
            config_service: 配置服务，为None时使用默认配置
            profile: 评估器配置文件名
        """
        self.logger = logging.getLogger(__name__)
        self.config_service = config_service or ConfigService()
        if evaluator is None:
            config = self.config_service.get_evaluator_config(profile).data
            evaluator = HandEvaluator(trace_evaluations=config.trace_evaluations)
        self.evaluator = evaluator

    def resolve(self, player_cards: Mapping[str, Sequence[Card]],
                community_cards: Iterable[Card] = ()) -> QueryResult[ShowdownResult]:
        """
        摊牌：评估所有玩家的最佳牌型并找出获胜者

        Args:
            player_cards: 玩家ID到手牌的映射
            community_cards: 公共牌

        Returns:
            查询结果，包含每位玩家的评估结果和获胜者（并列时有多位）
        """
        try:
            community = list(community_cards)
            self._validate(player_cards, community)
        except ValidationError as e:
            self.logger.warning(f"摊牌输入无效: {e.message}")
            return QueryResult.validation_error(e.message, e.error_code)

        self.logger.info(f"[摊牌] {len(player_cards)}名玩家参与摊牌，公共牌: {[str(c) for c in community]}")

        evaluations: Dict[str, HandEvaluation] = {}
        for player_id, hole_cards in player_cards.items():
            evaluation = self.evaluator.evaluate_hand(hole_cards, community)
            evaluations[player_id] = evaluation
            self.logger.info(f"[手牌评估] 玩家 {player_id} 的手牌: {[str(c) for c in hole_cards]}, 牌力: {evaluation}")

        player_ids: List[str] = list(evaluations.keys())
        winner_indices = find_winners([evaluations[p] for p in player_ids])
        winner_ids = tuple(player_ids[i] for i in winner_indices)

        self.logger.info(f"[摊牌] 获胜者: {list(winner_ids)}")
        return QueryResult.success_result(ShowdownResult(evaluations, winner_ids))

    def _validate(self, player_cards: Mapping[str, Sequence[Card]], community: List[Card]) -> None:
        """校验摊牌输入"""
        if not player_cards:
            raise ValidationError("摊牌至少需要一名玩家", NO_PLAYERS)

        for i, card in enumerate(community):
            if not isinstance(card, Card):
                raise InvalidCardError(f"第{i}张公共牌必须是Card类型，实际: {type(card)}")

        for player_id, hole_cards in player_cards.items():
            for card in hole_cards:
                if not isinstance(card, Card):
                    raise InvalidCardError(
                        f"玩家 {player_id} 的手牌必须是Card类型，实际: {type(card)}",
                        player_id
                    )
