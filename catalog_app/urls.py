from django.urls import path

from catalog_app import views

urlpatterns = [
    path("", views.movie_list, name="movie_list"),
    path("api/movies", views.movies_api, name="movies_api"),
]
