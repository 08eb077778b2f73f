"""接口层异常"""


class ListenerStartupError(RuntimeError):
    """监听启动失败（端口绑定失败、TLS 证书或私钥加载失败等）"""
