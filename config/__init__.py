"""仿真配置"""
