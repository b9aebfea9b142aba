"""
URL configuration for backend project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.urls import path
from places.views import text_search, search_prompts, sample_places, place_card
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("api/places/search/", text_search),
    path("api/places/search/prompts/", search_prompts),
    path("api/places/samples/", sample_places),
    path("api/places/<str:place_id>/card/", place_card),
]
urlpatterns += [
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
]
