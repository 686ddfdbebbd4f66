"""
Property Tests - 性质测试

基于hypothesis的性质测试，验证评估与比较的数学不变量：
幂等性、输入顺序无关、牌型优先级单调以及比较关系的全序性。
"""
