import logging
import uuid

from django.http import FileResponse
from django.utils.translation import gettext_lazy as _
from rest_framework import generics, permissions, status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from .filters import ContentFilter
from .models import Content, DOCUMENTS
from .serializers import ContentSerializer, ContentSubmissionSerializer

logger = logging.getLogger(__name__)


def remove_stored_file(content):
    """
    Best-effort removal of an uploaded document. Failures are logged and
    swallowed so the database row can still be deleted.
    """
    if not content.file:
        return False
    path = content.file.name
    try:
        content.file.delete(save=False)
    except Exception as e:
        logger.error(f"File deletion error for content {content.pk} ({path}): {e}", exc_info=True)
        return False
    logger.info(f"File deleted: {path}")
    return True


class ContentView(generics.ListCreateAPIView):
    """
    The authenticated user's saved content.
    GET    /api/v1/content?type=<type>   list, newest first
    POST   /api/v1/content               create (multipart when a file is attached)
    DELETE /api/v1/content               body: {"contentId": "<uuid>"}
    """
    serializer_class = ContentSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = ContentFilter

    def get_queryset(self):
        return Content.objects.filter(owner=self.request.user).select_related('owner').prefetch_related('tags').order_by('-created_at')

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return Response({
            'success': True,
            'contents': serializer.data,
            'total': len(serializer.data),
        })

    def create(self, request, *args, **kwargs):
        submission = ContentSubmissionSerializer(data=request.data, context=self.get_serializer_context())
        submission.is_valid(raise_exception=True)
        content = submission.save(owner=request.user)
        logger.info(f"User {request.user.pk} saved {content.type} content {content.pk}")

        return Response({
            'success': True,
            'message': submission.success_message,
            'data': self.get_serializer(content).data,
        }, status=status.HTTP_201_CREATED)

    def delete(self, request, *args, **kwargs):
        content_id = request.data.get('contentId')
        if not content_id:
            raise ValidationError({'contentId': [_("Content ID is required")]})

        # Someone else's item and a malformed id both read as "not found".
        try:
            content_id = uuid.UUID(str(content_id))
        except ValueError:
            content = None
        else:
            content = Content.objects.filter(pk=content_id, owner=request.user).first()
        if content is None:
            raise NotFound(_("Content not found or unauthorized"))

        remove_stored_file(content)
        content.delete()
        logger.info(f"User {request.user.pk} deleted content {content_id}")
        return Response({'success': True, 'message': _("Content deleted successfully")})


class ContentDownloadView(APIView):
    """
    GET /api/v1/content/<id>/download
    Streams a stored document back to its owner as an attachment.
    """
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, pk, *args, **kwargs):
        content = Content.objects.filter(pk=pk, owner=request.user, type=DOCUMENTS).first()
        if content is None or not content.file:
            raise NotFound(_("Document file not found"))

        try:
            handle = content.file.open('rb')
        except FileNotFoundError:
            logger.warning(f"Stored file missing for content {content.pk}: {content.file.name}")
            raise NotFound(_("Document file not found"))

        return FileResponse(
            handle,
            as_attachment=True,
            filename=content.file_name or content.file.name.rsplit('/', 1)[-1],
            content_type='application/octet-stream',
        )
