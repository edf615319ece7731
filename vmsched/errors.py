"""
异常定义
"""


class InvalidRequestError(ValueError):
    """仿真请求无效（例如 VM 数量为 0、速度非正），在调用任何调度算法之前抛出"""
