from django.urls import path

from .views import ContentView, ContentDownloadView

app_name = 'content'

urlpatterns = [
    # GET list / POST create / DELETE by contentId
    path('content', ContentView.as_view(), name='content-list'),
    path('content/<uuid:pk>/download', ContentDownloadView.as_view(), name='content-download'),
]
