import time


REGION_LABELS = {
    "sidebar": "Collections",
    "url": "URL",
    "headers": "Headers",
    "body": "Body",
    "response": "Response",
}


def render_status(context, width):
    """
    context keys: status_msg, status_until, mode, method, region, pending,
                   collection
    """
    text = ""
    now = time.time()
    if context.get('status_msg') and now < context.get('status_until', 0):
        text = f" {context['status_msg']}"
    else:
        mode = context.get('mode', 'NORMAL')
        method = context.get('method', 'GET')
        region = REGION_LABELS.get(context.get('region', ''), '')
        text = f" {mode} | {method} | {region}"
        pending = context.get('pending')
        if pending:
            text += f" | {pending}"
        collection = context.get('collection')
        if collection:
            text += f" | {collection}"

    return text.ljust(width)[:width]
