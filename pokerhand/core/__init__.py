"""
Core Module - 纯领域逻辑层

该模块包含牌型评估的核心逻辑，不依赖应用层.

Modules:
    deck: 扑克牌、点数、花色和牌组
    eval: 牌型评估和手牌比较
"""
