"""Stable identity keys for metrics.

A metric is "the same metric" across two catalogs when its fully qualified
name matches. The qualified name is built the same way the Prometheus client
libraries build it: non-empty namespace, non-empty subsystem and name joined
with underscores.

    metric_key("apiserver", "", "request_total")     -> "apiserver_request_total"
    metric_key("", "", "up")                          -> "up"
    metric_key("kubelet", "pleg", "relist_duration")  -> "kubelet_pleg_relist_duration"
"""

KEY_SEPARATOR = "_"


def metric_key(namespace: str, subsystem: str, name: str) -> str:
    """Return the identity key for a metric.

    The name is not validated; an empty name simply contributes "".
    """
    parts = [part for part in (namespace, subsystem) if part]
    parts.append(name)
    return KEY_SEPARATOR.join(parts)
