import json
import logging

from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from panda_cloud.events import (
    EncodingCompletedEvent,
    EncodingProgressEvent,
    VideoCreatedEvent,
    VideoEncodedEvent,
)
from panda_cloud.exceptions import PandaError, UnknownCloud
from panda_cloud.manager import get_cloud
from panda_cloud.signals import dispatch


log = logging.getLogger(__name__)


class MissingParameter(Exception):
    pass


def _require(params, name):
    value = params.get(name)
    if not value:
        raise MissingParameter(name)
    return value


def _encoding_ids(params):
    return params.getlist('encoding_ids[]') or params.getlist('encoding_ids')


def _video_created(params):
    return VideoCreatedEvent(_require(params, 'video_id'), _encoding_ids(params))


def _video_encoded(params):
    return VideoEncodedEvent(_require(params, 'video_id'), _encoding_ids(params))


def _encoding_progress(params):
    progress = _require(params, 'progress')
    try:
        progress = int(progress)
    except ValueError:
        raise MissingParameter('progress')
    return EncodingProgressEvent(_require(params, 'encoding_id'), progress)


def _encoding_completed(params):
    return EncodingCompletedEvent(_require(params, 'encoding_id'))


# Event names as sent by Panda in notification callbacks
EVENT_BUILDERS = {
    'video-created': _video_created,
    'video-encoded': _video_encoded,
    'encoding-progress': _encoding_progress,
    'encoding-complete': _encoding_completed,
}


@csrf_exempt
@require_http_methods(['POST'])
def notify_view(request):
    """
    Endpoint Panda calls when a notification event is enabled.

    Params:
        event (required): video-created|video-encoded|encoding-progress|encoding-complete
        video_id: Required for video events
        encoding_ids[]: Encodings of the video (video events)
        encoding_id: Required for encoding events
        progress: Required for encoding-progress, integer percentage

    Returns:
        Empty 200 response once the matching signal has been sent
    """
    event_name = request.POST.get('event')
    builder = EVENT_BUILDERS.get(event_name)
    if builder is None:
        log.warning('Rejected Panda notification with unknown event %r', event_name)
        return JsonResponse({'error': f'Unknown event: {event_name}'}, status=400)

    try:
        event = builder(request.POST)
    except MissingParameter as e:
        log.warning('Rejected Panda notification %s: bad parameter %s', event_name, e)
        return JsonResponse({'error': f'Missing or invalid parameter: {e}'}, status=400)

    log.info('Dispatching %s', event.name)
    dispatch(event)
    return HttpResponse(status=200)


@csrf_exempt
@require_http_methods(['POST'])
def authorize_upload_view(request):
    """
    Register an upload session for the Panda uploader.

    JSON body:
        filename (required): Name of the file being uploaded
        filesize (required): Size in bytes
        profiles (optional): List of profile names to encode with
        use_all_profiles (optional): Encode with all profiles
        cloud (optional): Cloud name, default cloud otherwise

    Returns:
        JSON {"upload_url": ...} with the location to push the file to
    """
    try:
        payload = json.loads(request.body or b'{}')
    except ValueError:
        return JsonResponse({'error': 'Request body is not valid JSON'}, status=400)

    if not isinstance(payload, dict):
        return JsonResponse({'error': 'Request body must be a JSON object'}, status=400)

    filename = payload.get('filename')
    filesize = payload.get('filesize')
    if not filename or filesize in (None, ''):
        return JsonResponse({'error': 'Missing required parameter: filename, filesize'}, status=400)

    try:
        cloud = get_cloud(payload.get('cloud'))
    except UnknownCloud as e:
        return JsonResponse({'error': str(e)}, status=404)

    try:
        session = cloud.register_upload(
            filename,
            filesize,
            payload.get('profiles'),
            bool(payload.get('use_all_profiles', False)),
        )
    except PandaError as e:
        log.warning('Registering upload of %s failed: %s', filename, e)
        return JsonResponse({'error': str(e)}, status=502)

    return JsonResponse({'upload_url': session['location']})
